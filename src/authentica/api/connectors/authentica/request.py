"""Dispatch de requisições para a API Authentica via transporte do host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from authentica.api.connectors.authentica.credentials import AuthenticaApiCredential
from authentica.app.constants import CREDENTIAL_NAME, HttpMethod
from authentica.app.protocols.models import HttpRequestOptions

if TYPE_CHECKING:
    from authentica.app.protocols import ExecutionContextProtocol

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def build_request_options(
    method: str,
    base_url: str,
    path: str,
    body: dict[str, Any] | None = None,
) -> HttpRequestOptions:
    """Monta o descritor da requisição.

    O corpo só é anexado para métodos diferentes de GET.
    """
    return HttpRequestOptions(
        method=method,
        url=f"{base_url}{path}",
        headers=dict(JSON_HEADERS),
        body=body if method != HttpMethod.GET and body else None,
        json=True,
    )


async def do_request(
    context: ExecutionContextProtocol,
    method: str,
    path: str,
    body: dict[str, Any] | None = None,
    item_index: int = 0,
) -> Any:
    """Executa uma chamada autenticada à API Authentica.

    Args:
        context: Contexto de execução do host
        method: GET, POST ou DELETE
        path: Caminho do endpoint (ex: /api/v2/send-otp)
        body: Corpo JSON (ignorado em GET)
        item_index: Índice do item em execução (para logs)

    Returns:
        Resposta decodificada pelo transporte. Erros propagam sem alteração.
    """
    stored = await context.get_credentials(CREDENTIAL_NAME)
    credentials = AuthenticaApiCredential.parse(stored)
    options = build_request_options(method, credentials.base_url, path, body)

    logger.debug(
        "authentica_dispatch",
        extra={"method": method, "path": path, "item_index": item_index},
    )
    return await context.request_with_authentication(CREDENTIAL_NAME, options)
