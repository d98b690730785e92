"""Normalização das respostas em registros de saída uniformes."""

from __future__ import annotations

from typing import Any

from authentica.api.normalizers.authentica.extractor import extract_balance


def _with_raw(out: dict[str, Any], response: Any, include_raw: bool) -> dict[str, Any]:
    if include_raw and response is not None:
        out["raw"] = response
    return out


def normalize_send_otp(response: Any, include_raw: bool = False) -> dict[str, Any]:
    """Saída de send-otp: {"success": True} (+ raw)."""
    return _with_raw({"success": True}, response, include_raw)


def normalize_verify_otp(response: Any, include_raw: bool = False) -> dict[str, Any]:
    """Saída de verify-otp: {"verified": True} (+ raw)."""
    return _with_raw({"verified": True}, response, include_raw)


def normalize_balance(response: Any, include_raw: bool = False) -> dict[str, Any]:
    """Saída de balance: {"balance": <valor ou None>} (+ raw)."""
    return _with_raw({"balance": extract_balance(response)}, response, include_raw)


def normalize_error(error: BaseException) -> dict[str, Any]:
    """Saída de item com falha quando continue-on-fail está ativo."""
    return {"error": str(error)}
