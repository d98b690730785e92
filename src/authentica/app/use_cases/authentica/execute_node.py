"""Use case de execução do node Authentica."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from authentica.api.normalizers.authentica import normalize_error
from authentica.app.observability import reset_correlation_id, set_correlation_id
from authentica.app.protocols.models import NodeExecutionData
from authentica.app.use_cases.authentica.operations import resolve_handler
from authentica.utils.errors import NodeApiError

if TYPE_CHECKING:
    from authentica.app.protocols import ExecutionContextProtocol

logger = logging.getLogger(__name__)


class ExecuteAuthenticaNodeUseCase:
    """Orquestra a execução por item: validação, dispatch e normalização.

    `resource`, `operation` e `includeRaw` são lidos uma vez, no item 0.
    Falha de um item vira `{"error": ...}` quando continue-on-fail está
    ativo; caso contrário, aborta a execução com NodeApiError. Combinação
    resource/operation sem handler produz `{}` para cada item.
    """

    def __init__(self, context: ExecutionContextProtocol) -> None:
        self._context = context

    async def execute(self) -> list[list[NodeExecutionData]]:
        """Executa todos os itens e retorna uma única saída."""
        context = self._context
        items = context.get_input_data()
        return_data: list[NodeExecutionData] = []

        token = set_correlation_id()
        try:
            resource = str(context.get_node_parameter("resource", 0))
            operation = str(context.get_node_parameter("operation", 0))
            include_raw = bool(context.get_node_parameter("includeRaw", 0, False))

            logger.info(
                "authentica_execute_start",
                extra={"resource": resource, "operation": operation, "items": len(items)},
            )

            handler = resolve_handler(resource, operation)
            if handler is None:
                logger.warning(
                    "authentica_operation_unsupported",
                    extra={"resource": resource, "operation": operation},
                )

            for i in range(len(items)):
                try:
                    out = await handler(context, i, include_raw) if handler else {}
                    return_data.append(NodeExecutionData(json=out, paired_item=i))
                except Exception as error:
                    if context.continue_on_fail():
                        logger.warning(
                            "authentica_item_failed",
                            extra={"item_index": i, "error_type": type(error).__name__},
                        )
                        return_data.append(
                            NodeExecutionData(json=normalize_error(error), paired_item=i)
                        )
                        continue
                    raise NodeApiError(error, item_index=i) from error
        finally:
            reset_correlation_id(token)

        return [return_data]
