"""Extrator de campos das respostas da API Authentica.

Apenas extração estrutural, sem validação de negócio.
"""

from __future__ import annotations

from typing import Any


def _get(obj: Any, key: str) -> Any:
    """Lê `key` de um dict; None para qualquer outro tipo."""
    if isinstance(obj, dict):
        return obj.get(key)
    return None


def extract_balance(response: Any) -> Any:
    """Extrai o saldo da resposta de GET /api/v2/balance.

    Formatos aceitos:
        {"data": {"balance": 10}}
        {"data": {"data": {"balance": 10}}}
        {"balance": 10}

    Returns:
        Valor de balance como enviado pela API, ou None se ausente.
    """
    data = _get(response, "data")
    if data is None:
        data = response

    balance = _get(data, "balance")
    if balance is None:
        balance = _get(_get(data, "data"), "balance")
    return balance
