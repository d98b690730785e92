"""Resolução de parâmetros do node fora do host."""

from authentica.app.infra.parameters.static_parameters import StaticParameterSource

__all__ = ["StaticParameterSource"]
