import pytest

from view_constants.config import ServerConfig, ViewConstantsConfig
from view_constants.store import ConstantStore


@pytest.fixture
def store():
    return ConstantStore()


@pytest.fixture
def make_config():
    """Build a server configuration around the given context section."""

    def _make(**context):
        return ViewConstantsConfig(
            server=ServerConfig(session_secret="test-secret"),
            context=context,
        )

    return _make
