"""Protocolo do contexto de execução fornecido pelo host."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import HttpRequestOptions


class ExecutionContextProtocol(Protocol):
    """Contexto do loop por item do host.

    Agrega itens de entrada, parâmetros, credenciais, transporte
    autenticado e a política continue-on-fail.
    """

    def get_input_data(self) -> list[dict[str, Any]]: ...

    def get_node_parameter(
        self,
        name: str,
        item_index: int,
        default: Any = ...,
    ) -> Any: ...

    async def get_credentials(self, name: str) -> dict[str, Any]: ...

    async def request_with_authentication(
        self,
        credential_name: str,
        options: HttpRequestOptions,
    ) -> Any: ...

    def continue_on_fail(self) -> bool: ...
