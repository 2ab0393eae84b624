"""
Blockchain Abstraction Layer
============================

Chain RPC access and crypto payment verification.
"""

from .factory import BlockchainFactory
from .interface import BlockchainException, BlockchainVerifierInterface
from .rpc_client import ChainRPCClient
from .verifiers import MockBlockchainVerifier, StubBlockchainVerifier

__all__ = [
    "BlockchainVerifierInterface",
    "BlockchainException",
    "ChainRPCClient",
    "StubBlockchainVerifier",
    "MockBlockchainVerifier",
    "BlockchainFactory",
]
