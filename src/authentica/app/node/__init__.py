"""Descrição declarativa do node Authentica."""

from authentica.app.node.description import (
    AUTHENTICA_NODE_DESCRIPTION,
    NodeDescription,
    NodeOption,
    NodeProperty,
)

__all__ = [
    "AUTHENTICA_NODE_DESCRIPTION",
    "NodeDescription",
    "NodeOption",
    "NodeProperty",
]
