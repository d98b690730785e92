"""Descrição do node: propriedades, opções e regras de exibição.

Cada propriedade pode declarar `show`: só é exibida (e tem default
aplicado) quando todos os parâmetros listados têm um dos valores aceitos.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from authentica.app.constants import CREDENTIAL_NAME, Operation, OtpMethod, Resource, VerifyWith


@dataclass(frozen=True)
class NodeOption:
    """Opção de uma propriedade do tipo `options`."""

    name: str
    value: str
    action: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class NodeProperty:
    """Parâmetro configurável do node."""

    display_name: str
    name: str
    type: str
    default: Any
    options: tuple[NodeOption, ...] = ()
    required: bool = False
    placeholder: str = ""
    hint: str = ""
    no_data_expression: bool = False
    show: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def is_visible(self, values: Mapping[str, Any]) -> bool:
        """True se todas as condições de `show` são atendidas por `values`."""
        return all(values.get(key) in allowed for key, allowed in self.show.items())

    def allowed_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.options)


@dataclass(frozen=True)
class NodeDescription:
    """Metadados do node e suas propriedades, na ordem de exibição."""

    display_name: str
    name: str
    icon: str
    group: tuple[str, ...]
    version: int
    description: str
    defaults: Mapping[str, str]
    credentials: tuple[tuple[str, bool], ...]
    properties: tuple[NodeProperty, ...]

    def visible_properties(self, values: Mapping[str, Any]) -> list[NodeProperty]:
        """Propriedades exibidas para os valores informados."""
        resolved = self.resolve_defaults(values)
        return [prop for prop in self.properties if prop.is_visible(resolved)]

    def get_property(self, name: str, values: Mapping[str, Any]) -> NodeProperty | None:
        """Propriedade visível com o nome dado (ex: `operation` por resource)."""
        for prop in self.visible_properties(values):
            if prop.name == name:
                return prop
        return None

    def resolve_defaults(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Completa `values` com os defaults das propriedades visíveis.

        A ordem das propriedades importa: `resource` é resolvido antes de
        `operation`, que é resolvido antes dos campos dependentes.
        """
        resolved = dict(values)
        for prop in self.properties:
            if prop.name not in resolved and prop.is_visible(resolved):
                resolved[prop.name] = prop.default
        return resolved


_SEND = {"resource": (Resource.OTP,), "operation": (Operation.SEND,)}
_VERIFY = {"resource": (Resource.OTP,), "operation": (Operation.VERIFY,)}

AUTHENTICA_NODE_DESCRIPTION = NodeDescription(
    display_name="Authentica",
    name="authentica",
    icon="file:authentica.svg",
    group=("transform",),
    version=1,
    description="OTP and account balance via Authentica",
    defaults={"name": "Authentica"},
    credentials=((CREDENTIAL_NAME, True),),
    properties=(
        # Resource
        NodeProperty(
            display_name="Resource",
            name="resource",
            type="options",
            no_data_expression=True,
            options=(
                NodeOption(name="Account", value=Resource.ACCOUNT),
                NodeOption(name="OTP", value=Resource.OTP),
            ),
            default=Resource.OTP,
        ),
        # OTP
        NodeProperty(
            display_name="Operation",
            name="operation",
            type="options",
            no_data_expression=True,
            show={"resource": (Resource.OTP,)},
            options=(
                NodeOption(
                    name="Send",
                    value=Operation.SEND,
                    action="Send an OTP",
                    description="Send an OTP",
                ),
                NodeOption(
                    name="Verify",
                    value=Operation.VERIFY,
                    action="Verify an OTP",
                    description="Verify an OTP",
                ),
            ),
            default=Operation.SEND,
        ),
        NodeProperty(
            display_name="Method",
            name="otpMethod",
            type="options",
            no_data_expression=True,
            options=(
                NodeOption(name="Email", value=OtpMethod.EMAIL),
                NodeOption(name="SMS", value=OtpMethod.SMS),
                NodeOption(name="WhatsApp", value=OtpMethod.WHATSAPP),
            ),
            default=OtpMethod.SMS,
            show=_SEND,
        ),
        NodeProperty(
            display_name="Phone",
            name="phone",
            type="string",
            placeholder="+9665XXXXXXXX",
            default="",
            show={**_SEND, "otpMethod": (OtpMethod.SMS, OtpMethod.WHATSAPP)},
        ),
        NodeProperty(
            display_name="Email",
            name="email",
            type="string",
            placeholder="user@example.com",
            default="",
            show={**_SEND, "otpMethod": (OtpMethod.EMAIL,)},
        ),
        NodeProperty(
            display_name="Verify With",
            name="verifyWith",
            type="options",
            no_data_expression=True,
            options=(
                NodeOption(name="Phone", value=VerifyWith.PHONE),
                NodeOption(name="Email", value=VerifyWith.EMAIL),
            ),
            default=VerifyWith.PHONE,
            show=_VERIFY,
        ),
        NodeProperty(
            display_name="Phone",
            name="verifyPhone",
            type="string",
            placeholder="+9665XXXXXXXX",
            default="",
            required=True,
            show={**_VERIFY, "verifyWith": (VerifyWith.PHONE,)},
        ),
        NodeProperty(
            display_name="Email",
            name="verifyEmail",
            type="string",
            placeholder="user@example.com",
            default="",
            required=True,
            show={**_VERIFY, "verifyWith": (VerifyWith.EMAIL,)},
        ),
        NodeProperty(
            display_name="OTP Code",
            name="otp",
            type="string",
            default="",
            required=True,
            show=_VERIFY,
        ),
        # Account
        NodeProperty(
            display_name="Operation",
            name="operation",
            type="options",
            no_data_expression=True,
            show={"resource": (Resource.ACCOUNT,)},
            options=(
                NodeOption(name="Get Balance", value=Operation.GET_BALANCE, action="Get balance"),
            ),
            default=Operation.GET_BALANCE,
        ),
        # Advanced
        NodeProperty(
            display_name="Include Raw Response",
            name="includeRaw",
            type="boolean",
            default=False,
            hint="Attach full API response under `raw` (for debugging).",
        ),
    ),
)
