"""Enums de domínio e endpoints da API Authentica."""

from __future__ import annotations

from enum import StrEnum

CREDENTIAL_NAME = "authenticaApi"

SEND_OTP_PATH = "/api/v2/send-otp"
VERIFY_OTP_PATH = "/api/v2/verify-otp"
BALANCE_PATH = "/api/v2/balance"


class Resource(StrEnum):
    """Recursos expostos pelo node."""

    ACCOUNT = "account"
    OTP = "otp"


class Operation(StrEnum):
    """Operações por recurso (send/verify em otp, getBalance em account)."""

    SEND = "send"
    VERIFY = "verify"
    GET_BALANCE = "getBalance"


class OtpMethod(StrEnum):
    """Canal de entrega do OTP."""

    EMAIL = "email"
    SMS = "sms"
    WHATSAPP = "whatsapp"


class VerifyWith(StrEnum):
    """Identificador usado na verificação do OTP."""

    PHONE = "phone"
    EMAIL = "email"


class HttpMethod(StrEnum):
    """Métodos HTTP usados pelo dispatch."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
