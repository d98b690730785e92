"""Erros e helpers de parsing para a API Authentica."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuthenticaApiError:
    """Erro retornado pela API Authentica."""

    status_code: int
    message: str
    errors: dict[str, Any] | None = None

    @property
    def is_auth_error(self) -> bool:
        """True se a API rejeitou a credencial."""
        return self.status_code in (401, 403)


def parse_api_error(status_code: int, response_data: Any) -> AuthenticaApiError:
    """Extrai informações de erro do corpo de resposta.

    Formatos aceitos:
        {"message": "...", "errors": {"phone": ["..."]}}
        {"error": "..."}
        {"error": {"message": "..."}}

    Args:
        status_code: Status HTTP da resposta
        response_data: Corpo decodificado (ou texto bruto)

    Returns:
        AuthenticaApiError com a melhor mensagem disponível
    """
    message: str | None = None
    errors: dict[str, Any] | None = None

    if isinstance(response_data, dict):
        raw_message = response_data.get("message")
        raw_error = response_data.get("error")
        if isinstance(raw_message, str) and raw_message:
            message = raw_message
        elif isinstance(raw_error, str) and raw_error:
            message = raw_error
        elif isinstance(raw_error, dict) and isinstance(raw_error.get("message"), str):
            message = raw_error["message"]

        raw_errors = response_data.get("errors")
        if isinstance(raw_errors, dict):
            errors = raw_errors

    return AuthenticaApiError(
        status_code=status_code,
        message=message or f"Authentica API error (HTTP {status_code})",
        errors=errors,
    )
