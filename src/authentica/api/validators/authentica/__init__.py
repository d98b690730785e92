"""Validadores de identificadores de contato para a API Authentica.

Uso:
    from authentica.api.validators.authentica import validate_phone, ValidationError

    validate_phone("+966500000000")
"""

from authentica.api.validators.authentica.contact import (
    is_e164,
    is_email,
    validate_email,
    validate_phone,
)
from authentica.api.validators.authentica.errors import (
    INVALID_EMAIL_MESSAGE,
    INVALID_PHONE_MESSAGE,
    ValidationError,
)
from authentica.api.validators.authentica.patterns import E164_PATTERN, EMAIL_PATTERN

__all__ = [
    "E164_PATTERN",
    "EMAIL_PATTERN",
    "INVALID_EMAIL_MESSAGE",
    "INVALID_PHONE_MESSAGE",
    "ValidationError",
    "is_e164",
    "is_email",
    "validate_email",
    "validate_phone",
]
