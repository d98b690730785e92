"""Contratos de dados trocados com o host.

HttpRequestOptions: descritor completo de requisição entregue ao transporte.
NodeExecutionData: registro de saída por item de entrada.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HttpRequestOptions:
    """Descritor de requisição HTTP.

    O transporte do host injeta a autenticação a partir da credencial;
    `body` só é preenchido para métodos diferentes de GET.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None
    json: bool = True


@dataclass
class NodeExecutionData:
    """Registro de saída de um item.

    Attributes:
        json: Conteúdo normalizado (success/verified/balance/raw/error)
        paired_item: Índice do item de entrada que originou o registro
    """

    json: dict[str, Any]
    paired_item: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato de item do host."""
        data: dict[str, Any] = {"json": self.json}
        if self.paired_item is not None:
            data["pairedItem"] = {"item": self.paired_item}
        return data
