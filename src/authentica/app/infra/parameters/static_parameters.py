"""Parâmetros estáticos com overrides por item.

Ordem de resolução de `get_node_parameter(name, i, default)`:
1. override do item `i`
2. valor comum a todos os itens
3. default da propriedade visível na descrição do node
4. `default` informado pelo chamador
Sem nenhum deles, levanta NodeOperationError.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from authentica.app.node import AUTHENTICA_NODE_DESCRIPTION, NodeDescription
from authentica.utils.errors import NodeOperationError


class StaticParameterSource:
    """Implementa NodeParameterSourceProtocol com valores já resolvidos."""

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        item_overrides: Sequence[Mapping[str, Any]] | None = None,
        description: NodeDescription = AUTHENTICA_NODE_DESCRIPTION,
    ) -> None:
        self._values = dict(values or {})
        self._item_overrides = [dict(o) for o in (item_overrides or [])]
        self._description = description

    def _values_for(self, item_index: int) -> dict[str, Any]:
        merged = dict(self._values)
        if 0 <= item_index < len(self._item_overrides):
            merged.update(self._item_overrides[item_index])
        return self._description.resolve_defaults(merged)

    def get_node_parameter(
        self,
        name: str,
        item_index: int,
        default: Any = ...,
    ) -> Any:
        values = self._values_for(item_index)
        if name in values:
            return values[name]
        if default is not ...:
            return default
        raise NodeOperationError(
            f"Could not get parameter \"{name}\"",
            item_index=item_index,
        )
