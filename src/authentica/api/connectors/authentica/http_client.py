"""Cliente HTTP especializado para a API Authentica.

Estende HttpClient genérico com:
- Injeção dos headers da credencial `authenticaApi`
- Decodificação JSON da resposta
- Tratamento de erros da API (message/errors)
- Logging estruturado sem PII (API key, telefone, email, OTP)
- Teste de credencial (GET /api/v2/balance)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from authentica.api.connectors.authentica.api_errors import parse_api_error
from authentica.api.connectors.authentica.api_logging import log_api_error, log_success
from authentica.api.connectors.authentica.credentials import (
    AuthenticaApiCredential,
    AuthenticaCredentialData,
)
from authentica.api.connectors.authentica.http_base import (
    HttpClient,
    HttpClientConfig,
    HttpError,
)

if TYPE_CHECKING:
    from authentica.app.protocols import CredentialStoreProtocol, HttpRequestOptions
    from authentica.config.settings import AuthenticaSettings

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialTestResult:
    """Resultado do teste de credencial."""

    status: str  # "OK" | "Error"
    message: str

    @property
    def ok(self) -> bool:
        return self.status == "OK"


class AuthenticaHttpClient(HttpClient):
    """Transporte autenticado para a API Authentica.

    Implementa AuthenticatedHttpClientProtocol: recebe o descritor da
    requisição, injeta os headers da credencial e devolve o JSON.
    """

    def __init__(
        self,
        credential_store: CredentialStoreProtocol,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(config, http_client)
        self._credential_store = credential_store
        self._credential = AuthenticaApiCredential()

    async def request_with_authentication(
        self,
        credential_name: str,
        options: HttpRequestOptions,
    ) -> Any:
        """Executa a requisição com a credencial informada.

        Raises:
            ValueError: Se a credencial não é `authenticaApi`
            HttpError: Se erro de conexão, status >= 400 ou JSON inválido
        """
        if credential_name != self._credential.name:
            raise ValueError(f"Credencial não suportada: {credential_name}")

        stored = await self._credential_store.get_credentials(credential_name)
        credentials = self._credential.parse(stored)
        return await self._send(options, credentials)

    async def test_credentials(
        self,
        credentials: dict[str, Any] | AuthenticaCredentialData | None = None,
    ) -> CredentialTestResult:
        """Testa a credencial com GET /api/v2/balance.

        Args:
            credentials: Valores a testar; se None, usa o credential store.
        """
        if credentials is None:
            credentials = await self._credential_store.get_credentials(self._credential.name)
        data = self._credential.parse(credentials)

        problems = data.validate_values()
        if problems:
            return CredentialTestResult(status="Error", message="; ".join(problems))

        try:
            await self._send(self._credential.build_test_request(data), data)
        except HttpError as exc:
            return CredentialTestResult(status="Error", message=str(exc))
        return CredentialTestResult(status="OK", message="Connection successful")

    async def _send(
        self,
        options: HttpRequestOptions,
        credentials: AuthenticaCredentialData,
    ) -> Any:
        headers = {**options.headers, **self._credential.authenticate_headers(credentials)}
        body = options.body if options.method != "GET" else None
        response = await self.request(options.method, options.url, json=body, headers=headers)
        return self._process_response(response, options)

    def _process_response(
        self,
        response: httpx.Response,
        options: HttpRequestOptions,
    ) -> Any:
        """Processa response da API Authentica."""
        path = httpx.URL(options.url).path

        if response.status_code >= 400:
            api_error = parse_api_error(response.status_code, _decode_or_text(response))
            log_api_error(api_error, options.method, path)
            raise HttpError(
                api_error.message,
                status_code=response.status_code,
                api_error=api_error,
            )

        log_success(options.method, path, response.status_code)
        if not options.json:
            return response.text
        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            logger.error("authentica_invalid_json", extra={"path": path})
            raise HttpError("Response JSON inválido", status_code=response.status_code) from e


def _decode_or_text(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:  # JSONDecodeError ou UnicodeDecodeError
        return response.text


def create_authentica_http_client(
    credential_store: CredentialStoreProtocol,
    settings: AuthenticaSettings | None = None,
) -> AuthenticaHttpClient:
    """Factory para criar cliente Authentica com config padrão.

    Args:
        credential_store: Origem da credencial `authenticaApi`.
        settings: AuthenticaSettings opcional. Se None, carrega do ambiente.
    """
    from authentica.config.settings import get_authentica_settings

    authentica = settings or get_authentica_settings()
    config = HttpClientConfig(
        timeout_seconds=authentica.request_timeout_seconds,
        verify_ssl=authentica.verify_ssl,
    )
    return AuthenticaHttpClient(credential_store, config=config)
