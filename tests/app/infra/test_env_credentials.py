"""Testes para EnvCredentialStore."""

import pytest

from authentica.app.infra.secrets import EnvCredentialStore
from authentica.config.settings import AuthenticaSettings
from authentica.utils.errors import NodeOperationError


@pytest.mark.asyncio
async def test_returns_stored_shape() -> None:
    store = EnvCredentialStore(AuthenticaSettings(api_key="k", base_url="https://a.test"))
    assert await store.get_credentials("authenticaApi") == {
        "apiKey": "k",
        "baseUrl": "https://a.test",
    }


@pytest.mark.asyncio
async def test_unknown_credential() -> None:
    store = EnvCredentialStore(AuthenticaSettings(api_key="k"))
    with pytest.raises(NodeOperationError, match="Credentials not found: otherApi"):
        await store.get_credentials("otherApi")


@pytest.mark.asyncio
async def test_missing_api_key() -> None:
    store = EnvCredentialStore(AuthenticaSettings(api_key=""))
    with pytest.raises(NodeOperationError, match="AUTHENTICA_API_KEY"):
        await store.get_credentials("authenticaApi")
