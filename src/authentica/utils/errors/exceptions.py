"""Exceções do node Authentica.

NodeOperationError: uso inválido do node (parâmetro ausente, identificador
inválido).
NodeApiError: falha de um item da execução, envolvendo a causa original.
ConfigurationError: settings inválidas no bootstrap.
"""

from __future__ import annotations


class AuthenticaError(RuntimeError):
    """Base para erros do conector Authentica."""


class ConfigurationError(AuthenticaError):
    """Settings inválidas detectadas no bootstrap."""


class NodeOperationError(AuthenticaError):
    """Erro de operação detectado antes ou durante o dispatch."""

    def __init__(self, message: str, item_index: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.item_index = item_index


class NodeApiError(AuthenticaError):
    """Falha de um item, com índice do item e status HTTP quando conhecido."""

    def __init__(
        self,
        cause: BaseException,
        item_index: int,
        http_code: int | None = None,
    ) -> None:
        message = str(cause) or type(cause).__name__
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.item_index = item_index
        self.http_code = http_code if http_code is not None else getattr(cause, "status_code", None)
