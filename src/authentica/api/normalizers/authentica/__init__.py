"""Normalizer de respostas da API Authentica."""

from authentica.api.normalizers.authentica.extractor import extract_balance
from authentica.api.normalizers.authentica.normalizer import (
    normalize_balance,
    normalize_error,
    normalize_send_otp,
    normalize_verify_otp,
)

__all__ = [
    "extract_balance",
    "normalize_balance",
    "normalize_error",
    "normalize_send_otp",
    "normalize_verify_otp",
]
