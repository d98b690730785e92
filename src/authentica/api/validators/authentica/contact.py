"""Validadores de telefone e email."""

from __future__ import annotations

from authentica.api.validators.authentica.errors import (
    INVALID_EMAIL_MESSAGE,
    INVALID_PHONE_MESSAGE,
    ValidationError,
)
from authentica.api.validators.authentica.patterns import E164_PATTERN, EMAIL_PATTERN


def is_e164(phone: str | None) -> bool:
    """Retorna True se o telefone (sem espaços nas bordas) está em E.164."""
    return E164_PATTERN.match((phone or "").strip()) is not None


def is_email(value: str | None) -> bool:
    """Retorna True se o valor (sem espaços nas bordas) tem formato de email."""
    return EMAIL_PATTERN.match((value or "").strip()) is not None


def validate_phone(phone: str | None, item_index: int | None = None) -> None:
    """Valida telefone E.164.

    Raises:
        ValidationError: Se o telefone não está em E.164
    """
    if not is_e164(phone):
        raise ValidationError(INVALID_PHONE_MESSAGE, item_index=item_index)


def validate_email(email: str | None, item_index: int | None = None) -> None:
    """Valida email.

    Raises:
        ValidationError: Se o email é inválido
    """
    if not is_email(email):
        raise ValidationError(INVALID_EMAIL_MESSAGE, item_index=item_index)
