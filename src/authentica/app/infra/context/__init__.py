"""Contexto de execução standalone (fora de um host de workflow)."""

from authentica.app.infra.context.standalone import StandaloneExecutionContext

__all__ = ["StandaloneExecutionContext"]
