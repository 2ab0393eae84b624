"""
Blockchain Verifier Interface
=============================

Contract used by the crypto payment flow. A real on-chain verifier can be
substituted without touching the sale flow.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional


class BlockchainVerifierInterface(ABC):
    """
    Abstract interface for crypto payment verification.

    Concrete implementations:
        - StubBlockchainVerifier: fetches the receipt over chain RPC, passes whenever it exists
        - MockBlockchainVerifier: fixed answer, records calls
    """

    @abstractmethod
    def verify(
        self,
        tx_hash: str,
        expected_amount: Decimal,
        buyer_wallet_id: Optional[str],
        seller_wallet_id: Optional[str],
    ) -> bool:
        """
        Verify that a chain transaction pays for a sale.

        Args:
            tx_hash: Transaction hash submitted by the buyer
            expected_amount: Product price
            buyer_wallet_id: Buyer's registered wallet id
            seller_wallet_id: Seller's registered wallet id

        Returns:
            True on pass, False on fail. Never raises for chain errors.
        """
        pass


class BlockchainException(Exception):
    """Raised by the chain RPC client on transport or JSON-RPC errors."""

    pass
