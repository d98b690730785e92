"""Settings específicas da API Authentica.

Credencial (API key + base URL) e parâmetros do transporte HTTP.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Authentica
AUTHENTICA_DEFAULT_BASE_URL: str = "https://api.authentica.sa"
AUTHENTICA_DOCUMENTATION_URL: str = "https://authenticasa.docs.apiary.io/#reference"


@dataclass(frozen=True)
class AuthenticaSettings:
    """Configurações da API Authentica.

    Attributes:
        api_key: API key enviada no header X-Authorization
        base_url: URL base da API (sem barra final)
        request_timeout_seconds: Timeout para requisições HTTP
        verify_ssl: Valida certificado TLS do servidor
    """

    # Credenciais (carregadas de env)
    api_key: str = ""
    base_url: str = AUTHENTICA_DEFAULT_BASE_URL

    # Transporte
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Authentica.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("AUTHENTICA_API_KEY não configurado")

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("AUTHENTICA_BASE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("AUTHENTICA_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> AuthenticaSettings:
    """Carrega AuthenticaSettings a partir de variáveis de ambiente."""
    base_url = os.getenv("AUTHENTICA_BASE_URL", "").strip() or AUTHENTICA_DEFAULT_BASE_URL
    return AuthenticaSettings(
        api_key=os.getenv("AUTHENTICA_API_KEY", ""),
        base_url=base_url.rstrip("/"),
        request_timeout_seconds=float(
            os.getenv("AUTHENTICA_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        verify_ssl=os.getenv("AUTHENTICA_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_authentica_settings() -> AuthenticaSettings:
    """Retorna instância cacheada de AuthenticaSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
