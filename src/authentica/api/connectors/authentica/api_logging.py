"""Helpers de logging para a API Authentica (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import AuthenticaApiError

logger = logging.getLogger(__name__)


def log_api_error(
    api_error: AuthenticaApiError,
    method: str,
    path: str,
) -> None:
    """Loga erro da API sem expor dados sensíveis."""
    logger.warning(
        "authentica_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": api_error.status_code,
            "is_auth_error": api_error.is_auth_error,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "authentica_request_ok",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
