"""Credential store baseado em variáveis de ambiente.

Lê AUTHENTICA_API_KEY e AUTHENTICA_BASE_URL via AuthenticaSettings e
expõe no formato armazenado pelo host (`apiKey`, `baseUrl`).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from authentica.app.constants import CREDENTIAL_NAME
from authentica.utils.errors import NodeOperationError

if TYPE_CHECKING:
    from authentica.config.settings import AuthenticaSettings

logger = logging.getLogger(__name__)


class EnvCredentialStore:
    """Provedor da credencial `authenticaApi` a partir do ambiente.

    Args:
        settings: AuthenticaSettings; se None, carrega do ambiente.
    """

    def __init__(self, settings: AuthenticaSettings | None = None) -> None:
        if settings is None:
            from authentica.config.settings import get_authentica_settings

            settings = get_authentica_settings()
        self._settings = settings

    async def get_credentials(self, name: str) -> dict[str, Any]:
        """Retorna os valores da credencial.

        Raises:
            NodeOperationError: Se a credencial pedida não existe ou a
                API key não está configurada.
        """
        if name != CREDENTIAL_NAME:
            raise NodeOperationError(f"Credentials not found: {name}")

        if not self._settings.api_key:
            logger.error("authentica_api_key_missing")
            raise NodeOperationError(
                "Credentials not found: authenticaApi (AUTHENTICA_API_KEY não configurado)"
            )

        return {
            "apiKey": self._settings.api_key,
            "baseUrl": self._settings.base_url,
        }
