"""Handlers por (resource, operation).

Cada handler lê os parâmetros do item, valida identificadores antes de
qualquer IO, faz o dispatch e devolve o registro de saída normalizado.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from authentica.api.connectors.authentica.request import do_request
from authentica.api.normalizers.authentica import (
    normalize_balance,
    normalize_send_otp,
    normalize_verify_otp,
)
from authentica.api.payload_builders.authentica import (
    SendOtpPayloadBuilder,
    VerifyOtpPayloadBuilder,
)
from authentica.api.validators.authentica import validate_email, validate_phone
from authentica.app.constants import (
    BALANCE_PATH,
    SEND_OTP_PATH,
    VERIFY_OTP_PATH,
    HttpMethod,
    Operation,
    OtpMethod,
    Resource,
    VerifyWith,
)

if TYPE_CHECKING:
    from authentica.app.protocols import ExecutionContextProtocol

OperationHandler = Callable[["ExecutionContextProtocol", int, bool], Awaitable[dict[str, Any]]]

_send_builder = SendOtpPayloadBuilder()
_verify_builder = VerifyOtpPayloadBuilder()


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


async def send_otp(
    context: ExecutionContextProtocol,
    item_index: int,
    include_raw: bool,
) -> dict[str, Any]:
    """otp/send: POST /api/v2/send-otp -> {"success": True}."""
    method = _as_str(context.get_node_parameter("otpMethod", item_index))
    phone = _as_str(context.get_node_parameter("phone", item_index, ""))
    email = _as_str(context.get_node_parameter("email", item_index, ""))

    if method != OtpMethod.EMAIL:
        validate_phone(phone, item_index)
    else:
        validate_email(email, item_index)

    body = _send_builder.build(method, phone=phone, email=email)
    response = await do_request(context, HttpMethod.POST, SEND_OTP_PATH, body, item_index)
    return normalize_send_otp(response, include_raw)


async def verify_otp(
    context: ExecutionContextProtocol,
    item_index: int,
    include_raw: bool,
) -> dict[str, Any]:
    """otp/verify: POST /api/v2/verify-otp -> {"verified": True}."""
    verify_with = _as_str(context.get_node_parameter("verifyWith", item_index))
    otp = _as_str(context.get_node_parameter("otp", item_index))

    if verify_with == VerifyWith.EMAIL:
        contact = _as_str(context.get_node_parameter("verifyEmail", item_index))
        validate_email(contact, item_index)
    else:
        contact = _as_str(context.get_node_parameter("verifyPhone", item_index))
        validate_phone(contact, item_index)

    body = _verify_builder.build(otp, verify_with, contact)
    response = await do_request(context, HttpMethod.POST, VERIFY_OTP_PATH, body, item_index)
    return normalize_verify_otp(response, include_raw)


async def get_balance(
    context: ExecutionContextProtocol,
    item_index: int,
    include_raw: bool,
) -> dict[str, Any]:
    """account/getBalance: GET /api/v2/balance -> {"balance": ...}."""
    response = await do_request(context, HttpMethod.GET, BALANCE_PATH, None, item_index)
    return normalize_balance(response, include_raw)


OPERATION_HANDLERS: dict[tuple[str, str], OperationHandler] = {
    (Resource.OTP, Operation.SEND): send_otp,
    (Resource.OTP, Operation.VERIFY): verify_otp,
    (Resource.ACCOUNT, Operation.GET_BALANCE): get_balance,
}


def resolve_handler(resource: str, operation: str) -> OperationHandler | None:
    """Retorna o handler da combinação resource/operation.

    Combinações fora da tabela retornam None; o item sai como `{}`.
    """
    return OPERATION_HANDLERS.get((resource, operation))
