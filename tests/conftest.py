import pytest

from urikit.uri.registry import SchemePortRegistry


@pytest.fixture
def registry():
    """Fixture providing a freshly seeded default port registry."""
    return SchemePortRegistry()
