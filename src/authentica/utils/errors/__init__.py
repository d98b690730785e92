"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticaError,
    ConfigurationError,
    NodeApiError,
    NodeOperationError,
)

__all__ = [
    "AuthenticaError",
    "ConfigurationError",
    "NodeApiError",
    "NodeOperationError",
]
