"""
Chain RPC Client
================

Minimal Ethereum JSON-RPC client over HTTP.
"""

import itertools
import logging
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings

from .interface import BlockchainException

logger = logging.getLogger(__name__)


class ChainRPCClient:
    """
    JSON-RPC 2.0 client for an Ethereum node.

    Configuration (in settings.py):
        ETHEREUM_RPC_URL: Node endpoint (e.g. a Sepolia provider URL)
        BLOCKCHAIN_RPC_TIMEOUT: Request timeout in seconds
    """

    def __init__(self, rpc_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.rpc_url = rpc_url or getattr(settings, "ETHEREUM_RPC_URL", "")
        self.timeout = timeout or getattr(settings, "BLOCKCHAIN_RPC_TIMEOUT", 10)
        self.session = session or requests.Session()
        self._ids = itertools.count(1)

        if not self.rpc_url:
            logger.warning("ETHEREUM_RPC_URL not configured")

    def call(self, method: str, params: List[Any]) -> Any:
        """
        Perform a JSON-RPC call and return its ``result``.

        Raises:
            BlockchainException: On HTTP failure or a JSON-RPC error object
        """
        if not self.rpc_url:
            raise BlockchainException("Chain RPC endpoint is not configured")

        payload = {"jsonrpc": "2.0", "method": method, "params": params, "id": next(self._ids)}

        try:
            response = self.session.post(self.rpc_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise BlockchainException(f"{method} request failed: {e}") from e
        except ValueError as e:
            raise BlockchainException(f"{method} returned invalid JSON") from e

        if body.get("error"):
            error = body["error"]
            raise BlockchainException(f"{method} error {error.get('code')}: {error.get('message')}")

        return body.get("result")

    def get_transaction_receipt(self, tx_hash: str) -> Dict[str, Any]:
        """
        Fetch the receipt of a mined transaction.

        Raises:
            BlockchainException: If the call fails or the transaction is unknown / not mined
        """
        receipt = self.call("eth_getTransactionReceipt", [tx_hash])
        if receipt is None:
            raise BlockchainException(f"No receipt for transaction {tx_hash}")
        return receipt
