"""Secrets — origem das credenciais `authenticaApi`.

Módulos disponíveis:
    - env_credentials: credencial a partir de variáveis de ambiente
"""

from __future__ import annotations

from authentica.app.infra.secrets.env_credentials import EnvCredentialStore

__all__ = [
    "EnvCredentialStore",
]
