"""Observabilidade — correlation_id por execução do node.

Uso:
    from authentica.app.observability import get_correlation_id, set_correlation_id
"""

from authentica.app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
