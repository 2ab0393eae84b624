"""
Blockchain Infrastructure Tests
================================

Unit tests for the chain RPC client and the crypto payment verifiers.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import requests
from django.test import TestCase

from infrastructure.blockchain import (
    BlockchainException,
    BlockchainFactory,
    ChainRPCClient,
    MockBlockchainVerifier,
    StubBlockchainVerifier,
)


def rpc_response(body):
    response = MagicMock()
    response.json.return_value = body
    response.raise_for_status.return_value = None
    return response


class ChainRPCClientTest(TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.client = ChainRPCClient(rpc_url="http://node.test", timeout=3, session=self.session)

    def test_call_returns_result(self):
        self.session.post.return_value = rpc_response({"jsonrpc": "2.0", "id": 1, "result": "0x10"})

        self.assertEqual(self.client.call("eth_blockNumber", []), "0x10")
        args, kwargs = self.session.post.call_args
        self.assertEqual(args[0], "http://node.test")
        self.assertEqual(kwargs["json"]["method"], "eth_blockNumber")
        self.assertEqual(kwargs["timeout"], 3)

    def test_json_rpc_error_raises(self):
        self.session.post.return_value = rpc_response({"error": {"code": -32602, "message": "invalid argument"}})

        with self.assertRaises(BlockchainException):
            self.client.call("eth_getTransactionReceipt", ["0xbad"])

    def test_transport_error_raises(self):
        self.session.post.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(BlockchainException):
            self.client.call("eth_blockNumber", [])

    def test_missing_receipt_raises(self):
        self.session.post.return_value = rpc_response({"jsonrpc": "2.0", "id": 1, "result": None})

        with self.assertRaises(BlockchainException):
            self.client.get_transaction_receipt("0xabc")

    def test_unconfigured_endpoint(self):
        client = ChainRPCClient(rpc_url="", session=self.session)
        client.rpc_url = ""

        with self.assertRaises(BlockchainException):
            client.call("eth_blockNumber", [])
        self.session.post.assert_not_called()


class StubBlockchainVerifierTest(TestCase):
    def setUp(self):
        self.rpc_client = MagicMock(spec=ChainRPCClient)
        self.verifier = StubBlockchainVerifier(rpc_client=self.rpc_client)

    def test_passes_when_receipt_exists(self):
        self.rpc_client.get_transaction_receipt.return_value = {"blockNumber": "0x1", "status": "0x1"}

        self.assertTrue(self.verifier.verify("0xhash", Decimal("1200"), "123456789012345", "987654321098765"))
        self.rpc_client.get_transaction_receipt.assert_called_once_with("0xhash")

    def test_fails_on_chain_error(self):
        self.rpc_client.get_transaction_receipt.side_effect = BlockchainException("No receipt")

        self.assertFalse(self.verifier.verify("0xhash", Decimal("1200"), None, None))


class MockBlockchainVerifierTest(TestCase):
    def test_records_calls(self):
        verifier = MockBlockchainVerifier(result=False)

        self.assertFalse(verifier.verify("0xabc", Decimal("10"), "1", "2"))
        self.assertEqual(verifier.calls[0]["tx_hash"], "0xabc")
        self.assertEqual(verifier.calls[0]["expected_amount"], Decimal("10"))

    def test_factory(self):
        self.assertIsInstance(BlockchainFactory.create("mock"), MockBlockchainVerifier)
        self.assertIsInstance(BlockchainFactory.create("stub"), StubBlockchainVerifier)
        with self.assertRaises(ValueError):
            BlockchainFactory.create("web3")
