"""Execução do node Authentica (send/verify OTP e saldo)."""

from authentica.app.use_cases.authentica.execute_node import ExecuteAuthenticaNodeUseCase
from authentica.app.use_cases.authentica.operations import (
    OPERATION_HANDLERS,
    get_balance,
    resolve_handler,
    send_otp,
    verify_otp,
)

__all__ = [
    "OPERATION_HANDLERS",
    "ExecuteAuthenticaNodeUseCase",
    "get_balance",
    "resolve_handler",
    "send_otp",
    "verify_otp",
]
