"""Testes para api/validators/authentica.

Cobre formato E.164, formato de email e as mensagens de erro expostas
ao usuário.
"""

import pytest

from authentica.api.validators.authentica import (
    INVALID_EMAIL_MESSAGE,
    INVALID_PHONE_MESSAGE,
    ValidationError,
    is_e164,
    is_email,
    validate_email,
    validate_phone,
)
from authentica.utils.errors import NodeOperationError


class TestIsE164:
    """Testa is_e164."""

    @pytest.mark.parametrize(
        "phone",
        [
            "+966500000000",
            "+1234567",  # 7 dígitos (mínimo)
            "+123456789012345",  # 15 dígitos (máximo)
            "  +966500000000  ",  # bordas ignoradas
        ],
    )
    def test_valid_numbers(self, phone: str) -> None:
        assert is_e164(phone) is True

    @pytest.mark.parametrize(
        "phone",
        [
            "",
            "966500000000",  # sem "+"
            "+0966500000",  # zero inicial
            "+123456",  # 6 dígitos
            "+1234567890123456",  # 16 dígitos
            "+9665 0000 0000",  # espaço interno
            "+9665-000-0000",
        ],
    )
    def test_invalid_numbers(self, phone: str) -> None:
        assert is_e164(phone) is False

    def test_none_is_invalid(self) -> None:
        assert is_e164(None) is False

    @pytest.mark.parametrize(
        "phone",
        [
            "+9٦٦٥٠٠٠٠٠٠",  # dígitos arábico-índicos
            "+966٥٠٠٠٠٠٠",
            "+٩٦٦500000000",
            "+966５００000000",  # dígitos de largura total
        ],
    )
    def test_non_ascii_digits_are_invalid(self, phone: str) -> None:
        assert is_e164(phone) is False
        with pytest.raises(ValidationError):
            validate_phone(phone)


class TestIsEmail:
    """Testa is_email."""

    def test_valid_emails(self) -> None:
        assert is_email("user@example.com")
        assert is_email(" user.name+tag@sub.example.sa ")

    @pytest.mark.parametrize(
        "value",
        ["", "user", "user@", "user@example", "@example.com", "us er@example.com", "a@b@c.com"],
    )
    def test_invalid_emails(self, value: str) -> None:
        assert is_email(value) is False

    def test_none_is_invalid(self) -> None:
        assert is_email(None) is False

    @pytest.mark.parametrize(
        "value",
        [
            "a\u00a0b@x.com",  # NBSP
            "user@exa\u2003mple.com",
            "user@example.\u3000com",
        ],
    )
    def test_unicode_whitespace_is_invalid(self, value: str) -> None:
        assert is_email(value) is False


class TestValidateHelpers:
    """Testa validate_phone/validate_email e ValidationError."""

    def test_validation_error_is_operation_error(self) -> None:
        assert issubclass(ValidationError, NodeOperationError)

    def test_validate_phone_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_phone("0500000000", item_index=2)
        assert str(exc_info.value) == INVALID_PHONE_MESSAGE
        assert exc_info.value.item_index == 2
        assert INVALID_PHONE_MESSAGE == "Phone must be E.164, e.g. +9665XXXXXXX"

    def test_validate_email_message(self) -> None:
        with pytest.raises(ValidationError, match="^Email is not valid$"):
            validate_email("not-an-email")
        assert INVALID_EMAIL_MESSAGE == "Email is not valid"

    def test_valid_values_do_not_raise(self) -> None:
        validate_phone("+966500000000")
        validate_email("user@example.com")
