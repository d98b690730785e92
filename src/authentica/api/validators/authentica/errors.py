"""Erros de validação de identificadores."""

from __future__ import annotations

from authentica.utils.errors import NodeOperationError

INVALID_PHONE_MESSAGE = "Phone must be E.164, e.g. +9665XXXXXXX"
INVALID_EMAIL_MESSAGE = "Email is not valid"


class ValidationError(NodeOperationError):
    """Identificador de contato inválido."""
