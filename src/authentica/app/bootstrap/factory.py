"""Factories para executar o node Authentica fora de um host.

Compõe settings -> credential store -> transporte httpx -> contexto.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from authentica.api.connectors.authentica.http_client import create_authentica_http_client
from authentica.app.infra.context import StandaloneExecutionContext
from authentica.app.infra.parameters import StaticParameterSource
from authentica.app.infra.secrets import EnvCredentialStore
from authentica.app.observability import get_correlation_id
from authentica.app.use_cases.authentica import ExecuteAuthenticaNodeUseCase
from authentica.config.logging import configure_logging
from authentica.utils.errors import ConfigurationError

if TYPE_CHECKING:
    from authentica.app.protocols import (
        AuthenticatedHttpClientProtocol,
        CredentialStoreProtocol,
        NodeExecutionData,
    )
    from authentica.config.settings import AuthenticaSettings, BaseSettings

logger = logging.getLogger(__name__)


def _require_valid(component: str, errors: list[str]) -> None:
    """Falha rápido quando as settings do componente têm erros."""
    if not errors:
        return
    logger.error(
        "settings_validation_failed",
        extra={"component": component, "error_count": len(errors)},
    )
    raise ConfigurationError("; ".join(f"{component}: {error}" for error in errors))


def configure_app_logging(settings: BaseSettings | None = None) -> None:
    """Configura logging JSON a partir de BaseSettings.

    Raises:
        ConfigurationError: Se BaseSettings.validate() retorna erros
    """
    from authentica.config.settings import get_base_settings

    base = settings or get_base_settings()
    _require_valid("base", base.validate())
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def create_standalone_context(
    values: Mapping[str, Any],
    *,
    items: list[dict[str, Any]] | None = None,
    item_overrides: Sequence[Mapping[str, Any]] | None = None,
    continue_on_fail: bool = False,
    settings: AuthenticaSettings | None = None,
    credential_store: CredentialStoreProtocol | None = None,
    http_client: AuthenticatedHttpClientProtocol | None = None,
) -> StandaloneExecutionContext:
    """Cria contexto de execução standalone.

    Args:
        values: Parâmetros comuns a todos os itens (ex: {"resource": "otp"})
        items: Itens de entrada; default um item vazio
        item_overrides: Parâmetros específicos por índice de item
        continue_on_fail: Captura erros por item em vez de abortar
        settings: AuthenticaSettings; se None, carrega do ambiente
        credential_store: Origem da credencial; default EnvCredentialStore
        http_client: Transporte; default AuthenticaHttpClient (httpx)

    Raises:
        ConfigurationError: Se o credential store vem do ambiente e
            AuthenticaSettings.validate() retorna erros
    """
    if credential_store is None or http_client is None:
        from authentica.config.settings import get_authentica_settings

        settings = settings or get_authentica_settings()

    if credential_store is None:
        _require_valid("authentica", settings.validate())
        credential_store = EnvCredentialStore(settings)

    transport = http_client or create_authentica_http_client(credential_store, settings)
    return StandaloneExecutionContext(
        items=items if items is not None else [{}],
        parameters=StaticParameterSource(values, item_overrides),
        credential_store=credential_store,
        http_client=transport,
        continue_on_fail=continue_on_fail,
    )


async def run_authentica_node(
    values: Mapping[str, Any],
    **kwargs: Any,
) -> list[NodeExecutionData]:
    """Executa o node com adapters standalone e retorna a única saída."""
    context = create_standalone_context(values, **kwargs)
    outputs = await ExecuteAuthenticaNodeUseCase(context).execute()
    return outputs[0]
