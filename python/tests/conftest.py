"""
Pytest configuration and shared fixtures for Nomenclator tests.
"""

import pytest

from nomenclator import server_state
from nomenclator.assistant import NamingAssistant
from nomenclator.config import NomenclatorConfig
from nomenclator.engine import NameSearchEngine
from nomenclator.naming.contexts import NamingContext
from nomenclator.naming.conventions import CAMEL_CASE


@pytest.fixture
def engine():
    """An initialized engine on the DEFAULT profile with the built-in corpus."""
    return NameSearchEngine().initialize()


@pytest.fixture
def assistant(engine):
    return NamingAssistant(engine)


@pytest.fixture
def small_context():
    """A tiny camelCase context so candidate lists are easy to enumerate."""
    return NamingContext(
        name="test",
        convention=CAMEL_CASE,
        prefixes=("get", "set"),
        suffixes=("Handler",),
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration environment variables for the duration of a test."""
    monkeypatch.delenv("NOMENCLATOR_CONFIG", raising=False)
    monkeypatch.delenv("NOMENCLATOR_PROFILE", raising=False)


@pytest.fixture
def server_config():
    """
    Give the MCP tool wrappers a fresh assistant built from default settings.

    Resets the shared server state before and after the test.
    """
    server_state.reset()
    server_state.config = NomenclatorConfig()
    yield server_state.config
    server_state.reset()
