"""Cliente HTTP base para conectores da camada API.

Uma tentativa por chamada; falhas de conexão viram HttpError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from authentica.api.connectors.authentica.api_errors import AuthenticaApiError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        api_error: AuthenticaApiError | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.api_error = api_error


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Aceita um httpx.AsyncClient já criado (compartilhado pelo chamador);
    sem ele, abre um cliente por chamada.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    async def request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        kwargs: dict[str, Any] = {
            "headers": merged_headers,
            "timeout": self._config.timeout_seconds,
        }
        if json is not None:
            kwargs["json"] = json

        try:
            if self._http_client is not None:
                return await self._http_client.request(method, url, **kwargs)
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                return await client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method})
            raise HttpError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"method": method})
            raise HttpError("http_connection_error") from exc
