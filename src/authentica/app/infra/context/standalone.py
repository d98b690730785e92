"""Contexto de execução que compõe os adapters standalone.

Implementa ExecutionContextProtocol delegando para:
- NodeParameterSourceProtocol (parâmetros)
- CredentialStoreProtocol (credenciais)
- AuthenticatedHttpClientProtocol (transporte)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from authentica.app.protocols import (
        AuthenticatedHttpClientProtocol,
        CredentialStoreProtocol,
        HttpRequestOptions,
        NodeParameterSourceProtocol,
    )


class StandaloneExecutionContext:
    """Contexto mínimo para executar o node sem host."""

    def __init__(
        self,
        *,
        items: list[dict[str, Any]],
        parameters: NodeParameterSourceProtocol,
        credential_store: CredentialStoreProtocol,
        http_client: AuthenticatedHttpClientProtocol,
        continue_on_fail: bool = False,
    ) -> None:
        self._items = items
        self._parameters = parameters
        self._credential_store = credential_store
        self._http_client = http_client
        self._continue_on_fail = continue_on_fail

    def get_input_data(self) -> list[dict[str, Any]]:
        return self._items

    def get_node_parameter(self, name: str, item_index: int, default: Any = ...) -> Any:
        return self._parameters.get_node_parameter(name, item_index, default)

    async def get_credentials(self, name: str) -> dict[str, Any]:
        return await self._credential_store.get_credentials(name)

    async def request_with_authentication(
        self,
        credential_name: str,
        options: HttpRequestOptions,
    ) -> Any:
        return await self._http_client.request_with_authentication(credential_name, options)

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail
