"""Definição declarativa da credencial `authenticaApi`.

A credencial guarda API key e base URL. A autenticação é genérica:
os headers `X-Authorization` e `Accept` são injetados em toda requisição.
O teste da credencial é um GET em /api/v2/balance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from authentica.app.constants import BALANCE_PATH, CREDENTIAL_NAME, HttpMethod
from authentica.app.protocols.models import HttpRequestOptions
from authentica.config.settings import (
    AUTHENTICA_DEFAULT_BASE_URL,
    AUTHENTICA_DOCUMENTATION_URL,
)


@dataclass(frozen=True)
class CredentialProperty:
    """Campo exibido no formulário da credencial."""

    display_name: str
    name: str
    type: str = "string"
    default: Any = ""
    required: bool = False
    password: bool = False
    description: str = ""


class AuthenticaCredentialData(BaseModel):
    """Valores armazenados da credencial, já resolvidos pelo host."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    api_key: str = Field(default="", alias="apiKey", description="API key da Authentica.")
    base_url: str = Field(
        default=AUTHENTICA_DEFAULT_BASE_URL,
        alias="baseUrl",
        description="URL base da API.",
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def _default_base_url(cls, value: Any) -> str:
        # Valor vazio ou ausente cai no endpoint público
        if value is None or not str(value).strip():
            return AUTHENTICA_DEFAULT_BASE_URL
        return str(value)

    def validate_values(self) -> list[str]:
        """Valida valores mínimos da credencial (lista vazia = OK)."""
        errors: list[str] = []
        if not self.api_key.strip():
            errors.append("apiKey é obrigatório")
        if not self.base_url.startswith(("http://", "https://")):
            errors.append("baseUrl deve começar com http:// ou https://")
        return errors


class AuthenticaApiCredential:
    """Tipo de credencial `authenticaApi`."""

    name = CREDENTIAL_NAME
    display_name = "Authentica API"
    documentation_url = AUTHENTICA_DOCUMENTATION_URL

    properties: tuple[CredentialProperty, ...] = (
        CredentialProperty(
            display_name="API Key",
            name="apiKey",
            password=True,
            required=True,
            description=(
                "Paste your Authentica API key (sent as header <code>X-Authorization</code>)."
            ),
        ),
        CredentialProperty(
            display_name="Base URL",
            name="baseUrl",
            default=AUTHENTICA_DEFAULT_BASE_URL,
            required=True,
        ),
    )

    @staticmethod
    def parse(values: dict[str, Any] | AuthenticaCredentialData | None) -> AuthenticaCredentialData:
        """Converte o mapeamento armazenado pelo host no modelo tipado."""
        if isinstance(values, AuthenticaCredentialData):
            return values
        return AuthenticaCredentialData.model_validate(values or {})

    def authenticate_headers(self, credentials: AuthenticaCredentialData) -> dict[str, str]:
        """Headers injetados em toda requisição autenticada."""
        return {
            "X-Authorization": credentials.api_key,
            "Accept": "application/json",
        }

    def build_test_request(self, credentials: AuthenticaCredentialData) -> HttpRequestOptions:
        """Requisição usada para testar a credencial."""
        return HttpRequestOptions(
            method=HttpMethod.GET,
            url=f"{credentials.base_url}{BALANCE_PATH}",
        )
