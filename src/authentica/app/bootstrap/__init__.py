"""Bootstrap — composição dos adapters standalone e do logging."""

from authentica.app.bootstrap.factory import (
    configure_app_logging,
    create_standalone_context,
    run_authentica_node,
)

__all__ = [
    "configure_app_logging",
    "create_standalone_context",
    "run_authentica_node",
]
