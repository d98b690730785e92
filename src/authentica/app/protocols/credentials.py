"""Protocolo de armazenamento de credenciais."""

from __future__ import annotations

from typing import Any, Protocol


class CredentialStoreProtocol(Protocol):
    """Contrato mínimo para obter credenciais armazenadas pelo nome."""

    async def get_credentials(self, name: str) -> dict[str, Any]: ...
