"""
Blockchain Verifier Factory
===========================

Creates the verifier selected by settings.INFRASTRUCTURE["BLOCKCHAIN_VERIFIER"].
"""

import logging
from typing import Literal

from django.conf import settings

from .interface import BlockchainVerifierInterface
from .verifiers import MockBlockchainVerifier, StubBlockchainVerifier

logger = logging.getLogger(__name__)

VerifierBackend = Literal["stub", "mock"]


class BlockchainFactory:
    """
    Factory for blockchain verifiers.

    Usage:
        verifier = BlockchainFactory.create()
        verifier.verify(tx_hash, price, buyer.metamask_id, seller.metamask_id)
    """

    @staticmethod
    def create(backend: VerifierBackend | None = None) -> BlockchainVerifierInterface:
        """
        Raises:
            ValueError: If backend type is invalid
        """
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = backend or infrastructure.get("BLOCKCHAIN_VERIFIER", "stub")

        logger.info(f"Creating blockchain verifier: {backend_type}")

        if backend_type == "stub":
            return StubBlockchainVerifier()
        if backend_type == "mock":
            return MockBlockchainVerifier()
        raise ValueError(f"Invalid blockchain verifier: {backend_type}. Must be 'stub' or 'mock'")
