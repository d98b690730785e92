"""Constantes e enums de domínio do node Authentica."""

from authentica.app.constants.authentica import (
    BALANCE_PATH,
    CREDENTIAL_NAME,
    SEND_OTP_PATH,
    VERIFY_OTP_PATH,
    HttpMethod,
    Operation,
    OtpMethod,
    Resource,
    VerifyWith,
)

__all__ = [
    "BALANCE_PATH",
    "CREDENTIAL_NAME",
    "SEND_OTP_PATH",
    "VERIFY_OTP_PATH",
    "HttpMethod",
    "Operation",
    "OtpMethod",
    "Resource",
    "VerifyWith",
]
