import pytest

from infrastructure.container import container


@pytest.fixture(autouse=True)
def mock_infrastructure():
    """Every test runs against the in-memory gateway, storage and verifier."""
    container.configure_for_testing()
    yield container
    container.reset()
