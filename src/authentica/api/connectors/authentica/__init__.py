"""Conector Authentica — adapter de borda para a API Authentica.

Responsabilidades:
- Definição declarativa da credencial `authenticaApi`
- Transporte HTTP autenticado (httpx)
- Dispatch de requisições (do_request)
- Parsing de erros da API
"""

from .api_errors import AuthenticaApiError, parse_api_error
from .credentials import AuthenticaApiCredential, AuthenticaCredentialData, CredentialProperty
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import AuthenticaHttpClient, CredentialTestResult, create_authentica_http_client
from .request import build_request_options, do_request

__all__ = [
    "AuthenticaApiCredential",
    "AuthenticaApiError",
    "AuthenticaCredentialData",
    "AuthenticaHttpClient",
    "CredentialProperty",
    "CredentialTestResult",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "build_request_options",
    "create_authentica_http_client",
    "do_request",
    "parse_api_error",
]
