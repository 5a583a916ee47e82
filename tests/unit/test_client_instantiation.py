"""
Unit tests for client class instantiation.

These tests verify that client classes can be instantiated without errors
and pick up credentials and base URLs from the environment.
"""

import os
from unittest.mock import patch

import pytest

from hop import AsyncHop, AuthType, Hop, InvalidArgumentError, SyncAPIClient
from hop._http import DEFAULT_BASE_URL
from hop.sdks import AsyncChannels, AsyncIgnite, Channels, Ignite, Projects, Registry


class TestClientInstantiation:
    """Test that all client classes can be instantiated."""

    @pytest.fixture
    def mock_env_token(self):
        """Provide a mock token via environment variable."""
        with patch.dict(os.environ, {"HOP_TOKEN": "ptk_env_token"}):
            yield

    @pytest.mark.parametrize("cls", [Ignite, AsyncIgnite, Channels, AsyncChannels, Projects, Registry])
    def test_sdk_from_env(self, cls, mock_env_token):
        sdk = cls()
        assert sdk.auth_type is AuthType.SK

    def test_sdk_with_token(self, bearer_token):
        sdk = Ignite(bearer_token)
        assert sdk.auth_type is AuthType.BEARER
        assert sdk._client.authorization.credential == bearer_token

    def test_sdk_shares_given_client(self, pat_token):
        client = SyncAPIClient(pat_token)
        assert Ignite(client=client)._client is client

    def test_missing_token(self):
        with pytest.raises(InvalidArgumentError, match="HOP_TOKEN"):
            Hop()

    def test_unknown_token_prefix(self):
        with pytest.raises(InvalidArgumentError):
            Hop("sometoken")

    def test_default_base_url(self, secret_key):
        assert SyncAPIClient(secret_key).base_url == DEFAULT_BASE_URL

    def test_base_url_from_env(self, secret_key):
        with patch.dict(os.environ, {"HOP_API_URL": "https://api.example.test"}):
            assert SyncAPIClient(secret_key).base_url == "https://api.example.test"

    def test_explicit_base_url_wins(self, secret_key):
        with patch.dict(os.environ, {"HOP_API_URL": "https://api.example.test"}):
            client = SyncAPIClient(secret_key, "https://other.example.test")
        assert client.base_url == "https://other.example.test"

    def test_hop_instantiation(self, mock_env_token):
        hop = Hop()
        assert hop.auth_type is AuthType.SK
        assert hop.sdks.ignite._client is hop.sdks.channels._client

    def test_async_hop_instantiation(self, pat_token):
        hop = AsyncHop(pat_token, timeout=5.0)
        assert hop.auth_type is AuthType.PAT
