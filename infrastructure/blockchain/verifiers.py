"""
Blockchain verifier implementations.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from utils.logging_utils import mask_value

from .interface import BlockchainException, BlockchainVerifierInterface
from .rpc_client import ChainRPCClient

logger = logging.getLogger(__name__)


class StubBlockchainVerifier(BlockchainVerifierInterface):
    """
    Verifier that only checks the transaction is reachable on chain.

    The receipt is fetched but amount, sender and recipient are not compared,
    so any transaction the node knows about passes. RPC failures fail.
    """

    def __init__(self, rpc_client: Optional[ChainRPCClient] = None):
        self.rpc_client = rpc_client or ChainRPCClient()

    def verify(
        self,
        tx_hash: str,
        expected_amount: Decimal,
        buyer_wallet_id: Optional[str],
        seller_wallet_id: Optional[str],
    ) -> bool:
        try:
            receipt = self.rpc_client.get_transaction_receipt(tx_hash)
        except BlockchainException as e:
            logger.error(f"Blockchain verification error for {mask_value(tx_hash)}: {e}")
            return False

        logger.info(
            f"Blockchain receipt found for {mask_value(tx_hash)} "
            f"(block {receipt.get('blockNumber')}, expected amount {expected_amount}, "
            f"buyer {mask_value(buyer_wallet_id or '')}, seller {mask_value(seller_wallet_id or '')})"
        )
        return True


class MockBlockchainVerifier(BlockchainVerifierInterface):
    """Verifier with a fixed answer. Records every call for assertions."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls: List[Dict[str, Any]] = []

    def verify(
        self,
        tx_hash: str,
        expected_amount: Decimal,
        buyer_wallet_id: Optional[str],
        seller_wallet_id: Optional[str],
    ) -> bool:
        self.calls.append(
            {
                "tx_hash": tx_hash,
                "expected_amount": expected_amount,
                "buyer_wallet_id": buyer_wallet_id,
                "seller_wallet_id": seller_wallet_id,
            }
        )
        logger.info(f"Mock blockchain verifier: {mask_value(tx_hash)} -> {self.result}")
        return self.result

    def clear(self):
        self.calls.clear()
        self.result = True
