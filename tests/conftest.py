"""
Pytest configuration and shared fixtures
"""

from unittest.mock import Mock

import pytest

from transporter.config import Config
from transporter.http_client import HttpClient


@pytest.fixture(autouse=True)
def clean_transporter_env(monkeypatch):
    """Keep the developer's environment out of config loading"""
    monkeypatch.delenv("TRANSPORTER_CONFIG", raising=False)
    monkeypatch.delenv("TRANSPORTER_BASE_URI", raising=False)


@pytest.fixture
def empty_config():
    """Config without a base URI"""
    return Config({})


@pytest.fixture
def test_config():
    """Config with a default base URI"""
    return Config({"transporter": {"base_uri": "https://config.example.com"}})


@pytest.fixture
def mock_http_client():
    """Mock HTTP client for testing dispatch"""
    return Mock(spec=HttpClient)
