"""Testes para ExecuteAuthenticaNodeUseCase.

Cobre as três operações, validação antes do envio, includeRaw e a
política continue-on-fail.
"""

from __future__ import annotations

from typing import Any

import pytest

from authentica.api.connectors.authentica import HttpError
from authentica.app.infra.context import StandaloneExecutionContext
from authentica.app.infra.parameters import StaticParameterSource
from authentica.app.use_cases.authentica import ExecuteAuthenticaNodeUseCase, resolve_handler
from authentica.utils.errors import NodeApiError, NodeOperationError
from tests.fakes.fake_authentica import FakeCredentialStore, FakeTransport


def _run_context(
    values: dict[str, Any],
    *,
    items: int = 1,
    overrides: list[dict[str, Any]] | None = None,
    responses: dict[str, Any] | None = None,
    continue_on_fail: bool = False,
) -> tuple[StandaloneExecutionContext, FakeTransport]:
    transport = FakeTransport(responses)
    context = StandaloneExecutionContext(
        items=[{} for _ in range(items)],
        parameters=StaticParameterSource(values, overrides),
        credential_store=FakeCredentialStore(),
        http_client=transport,
        continue_on_fail=continue_on_fail,
    )
    return context, transport


async def _execute(context: StandaloneExecutionContext) -> list[dict[str, Any]]:
    outputs = await ExecuteAuthenticaNodeUseCase(context).execute()
    assert len(outputs) == 1
    return [item.to_dict() for item in outputs[0]]


class TestSendOtp:
    @pytest.mark.asyncio
    async def test_send_sms(self) -> None:
        context, transport = _run_context(
            {"resource": "otp", "operation": "send", "otpMethod": "sms", "phone": "+966500000000"}
        )

        result = await _execute(context)

        assert result == [{"json": {"success": True}, "pairedItem": {"item": 0}}]
        _, options = transport.calls[0]
        assert options.method == "POST"
        assert options.url == "https://api.authentica.test/api/v2/send-otp"
        assert options.body == {"method": "sms", "phone": "+966500000000"}

    @pytest.mark.asyncio
    async def test_send_email(self) -> None:
        context, transport = _run_context(
            {"otpMethod": "email", "email": "user@example.com", "phone": "+966500000000"}
        )

        await _execute(context)

        assert transport.calls[0][1].body == {"method": "email", "email": "user@example.com"}

    @pytest.mark.asyncio
    async def test_invalid_phone_never_reaches_transport(self) -> None:
        context, transport = _run_context({"otpMethod": "whatsapp", "phone": "0500000000"})

        with pytest.raises(NodeApiError) as exc_info:
            await _execute(context)

        assert str(exc_info.value) == "Phone must be E.164, e.g. +9665XXXXXXX"
        assert exc_info.value.item_index == 0
        assert isinstance(exc_info.value.cause, NodeOperationError)
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_invalid_email_with_continue_on_fail(self) -> None:
        context, transport = _run_context(
            {"otpMethod": "email", "email": "nope"},
            continue_on_fail=True,
        )

        result = await _execute(context)

        assert result == [{"json": {"error": "Email is not valid"}, "pairedItem": {"item": 0}}]
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_include_raw(self) -> None:
        response = {"success": True, "message": "OTP sent"}
        context, _ = _run_context(
            {"phone": "+966500000000", "includeRaw": True},
            responses={"/api/v2/send-otp": response},
        )

        result = await _execute(context)

        assert result[0]["json"] == {"success": True, "raw": response}


class TestVerifyOtp:
    @pytest.mark.asyncio
    async def test_verify_with_phone(self) -> None:
        context, transport = _run_context(
            {"operation": "verify", "verifyPhone": "+966500000000", "otp": "123456"}
        )

        result = await _execute(context)

        assert result[0]["json"] == {"verified": True}
        _, options = transport.calls[0]
        assert options.url.endswith("/api/v2/verify-otp")
        assert options.body == {"otp": "123456", "phone": "+966500000000"}

    @pytest.mark.asyncio
    async def test_verify_with_email(self) -> None:
        context, transport = _run_context(
            {
                "operation": "verify",
                "verifyWith": "email",
                "verifyEmail": "user@example.com",
                "otp": "9999",
            }
        )

        await _execute(context)

        assert transport.calls[0][1].body == {"otp": "9999", "email": "user@example.com"}

    @pytest.mark.asyncio
    async def test_verify_invalid_phone(self) -> None:
        context, transport = _run_context(
            {"operation": "verify", "verifyPhone": "+12", "otp": "1"},
            continue_on_fail=True,
        )

        result = await _execute(context)

        assert result[0]["json"] == {"error": "Phone must be E.164, e.g. +9665XXXXXXX"}
        assert transport.calls == []


class TestGetBalance:
    @pytest.mark.asyncio
    async def test_balance_from_data(self) -> None:
        context, transport = _run_context(
            {"resource": "account"},
            responses={"/api/v2/balance": {"data": {"balance": 250}}},
        )

        result = await _execute(context)

        assert result == [{"json": {"balance": 250}, "pairedItem": {"item": 0}}]
        _, options = transport.calls[0]
        assert options.method == "GET"
        assert options.body is None

    @pytest.mark.asyncio
    async def test_balance_nested_and_raw(self) -> None:
        response = {"data": {"data": {"balance": 12.5}}}
        context, _ = _run_context(
            {"resource": "account", "includeRaw": True},
            responses={"/api/v2/balance": response},
        )

        result = await _execute(context)

        assert result[0]["json"] == {"balance": 12.5, "raw": response}

    @pytest.mark.asyncio
    async def test_balance_absent(self) -> None:
        context, _ = _run_context({"resource": "account"}, responses={"/api/v2/balance": {}})
        result = await _execute(context)
        assert result[0]["json"] == {"balance": None}


class TestPerItemExecution:
    @pytest.mark.asyncio
    async def test_one_output_per_item(self) -> None:
        context, transport = _run_context(
            {"otpMethod": "sms"},
            items=3,
            overrides=[
                {"phone": "+966500000001"},
                {"phone": "bad"},
                {"phone": "+966500000003"},
            ],
            continue_on_fail=True,
        )

        result = await _execute(context)

        assert [r["pairedItem"]["item"] for r in result] == [0, 1, 2]
        assert result[0]["json"] == {"success": True}
        assert result[1]["json"] == {"error": "Phone must be E.164, e.g. +9665XXXXXXX"}
        assert result[2]["json"] == {"success": True}
        assert [c[1].body["phone"] for c in transport.calls] == ["+966500000001", "+966500000003"]

    @pytest.mark.asyncio
    async def test_failure_aborts_run_with_item_index(self) -> None:
        context, transport = _run_context(
            {"otpMethod": "sms"},
            items=3,
            overrides=[{"phone": "+966500000001"}, {"phone": "bad"}, {"phone": "+966500000003"}],
        )

        with pytest.raises(NodeApiError) as exc_info:
            await _execute(context)

        assert exc_info.value.item_index == 1
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_api_error_captured(self) -> None:
        error = HttpError("Invalid OTP", status_code=400)
        context, _ = _run_context(
            {"operation": "verify", "verifyPhone": "+966500000000", "otp": "0"},
            responses={"/api/v2/verify-otp": error},
            continue_on_fail=True,
        )

        result = await _execute(context)

        assert result[0]["json"] == {"error": "Invalid OTP"}

    @pytest.mark.asyncio
    async def test_api_error_wrapped_with_status(self) -> None:
        error = HttpError("Unauthenticated.", status_code=401)
        context, _ = _run_context(
            {"resource": "account"},
            responses={"/api/v2/balance": error},
        )

        with pytest.raises(NodeApiError) as exc_info:
            await _execute(context)

        assert exc_info.value.http_code == 401
        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_operation_read_once_from_first_item(self) -> None:
        context, transport = _run_context(
            {"otpMethod": "sms", "phone": "+966500000000"},
            items=2,
            overrides=[{}, {"resource": "account"}],
        )

        result = await _execute(context)

        assert [r["json"] for r in result] == [{"success": True}, {"success": True}]
        assert all(c[1].url.endswith("/api/v2/send-otp") for c in transport.calls)

    @pytest.mark.asyncio
    async def test_no_items_no_output(self) -> None:
        context, transport = _run_context({}, items=0)
        assert await _execute(context) == []
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_unsupported_combination_emits_empty_record(self) -> None:
        context, transport = _run_context(
            {"resource": "account", "operation": "send"},
            items=2,
        )

        result = await _execute(context)

        assert result == [
            {"json": {}, "pairedItem": {"item": 0}},
            {"json": {}, "pairedItem": {"item": 1}},
        ]
        assert transport.calls == []


def test_resolve_handler_unknown() -> None:
    assert resolve_handler("account", "verify") is None
    assert resolve_handler("otp", "getBalance") is None
