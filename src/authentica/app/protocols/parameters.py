"""Protocolo de resolução de parâmetros do node."""

from __future__ import annotations

from typing import Any, Protocol


class NodeParameterSourceProtocol(Protocol):
    """Contrato mínimo para obter parâmetros já resolvidos por item.

    Parâmetro ausente sem default deve levantar NodeOperationError.
    """

    def get_node_parameter(
        self,
        name: str,
        item_index: int,
        default: Any = ...,
    ) -> Any: ...
