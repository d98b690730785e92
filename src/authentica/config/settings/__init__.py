"""Agregador de settings do conector Authentica.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from authentica.config.settings.authentica import (
    AUTHENTICA_DEFAULT_BASE_URL,
    AUTHENTICA_DOCUMENTATION_URL,
    AuthenticaSettings,
    get_authentica_settings,
)
from authentica.config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    # Constants
    "AUTHENTICA_DEFAULT_BASE_URL",
    "AUTHENTICA_DOCUMENTATION_URL",
    # Authentica
    "AuthenticaSettings",
    # Base
    "BaseSettings",
    "Environment",
    "get_authentica_settings",
    "get_base_settings",
]
