"""Builders de payload para a API Authentica."""

from authentica.api.payload_builders.authentica.otp import (
    SendOtpPayloadBuilder,
    VerifyOtpPayloadBuilder,
)

__all__ = [
    "SendOtpPayloadBuilder",
    "VerifyOtpPayloadBuilder",
]
