"""Protocolo do transporte HTTP com injeção de autenticação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import HttpRequestOptions


class AuthenticatedHttpClientProtocol(Protocol):
    """Contrato mínimo do transporte do host.

    Injeta os headers da credencial, executa a chamada e devolve o JSON
    decodificado. Erros HTTP são propagados como exceção.
    """

    async def request_with_authentication(
        self,
        credential_name: str,
        options: HttpRequestOptions,
    ) -> Any: ...
