#!/usr/bin/env python3
"""Executa operações da API Authentica a partir do terminal.

Uso:
    python scripts/authentica_cli.py send --method sms --phone +966500000000
    python scripts/authentica_cli.py verify --phone +966500000000 --otp 123456
    python scripts/authentica_cli.py balance --include-raw
    python scripts/authentica_cli.py test-credentials

Credencial lida de AUTHENTICA_API_KEY / AUTHENTICA_BASE_URL.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from authentica.api.connectors.authentica import create_authentica_http_client
from authentica.app.bootstrap import configure_app_logging, run_authentica_node
from authentica.app.infra.secrets import EnvCredentialStore
from authentica.utils.errors import AuthenticaError


def build_values(args: argparse.Namespace) -> dict[str, Any]:
    if args.command == "send":
        values: dict[str, Any] = {
            "resource": "otp",
            "operation": "send",
            "otpMethod": args.method,
        }
        if args.phone is not None:
            values["phone"] = args.phone
        if args.email is not None:
            values["email"] = args.email
    elif args.command == "verify":
        values = {"resource": "otp", "operation": "verify", "otp": args.otp}
        if args.email is not None:
            values["verifyWith"] = "email"
            values["verifyEmail"] = args.email
        else:
            values["verifyWith"] = "phone"
            values["verifyPhone"] = args.phone or ""
    else:
        values = {"resource": "account", "operation": "getBalance"}

    values["includeRaw"] = args.include_raw
    return values


async def check_credentials() -> int:
    try:
        client = create_authentica_http_client(EnvCredentialStore())
        result = await client.test_credentials()
    except AuthenticaError as exc:
        print(json.dumps({"status": "Error", "message": str(exc)}))
        return 1

    print(json.dumps({"status": result.status, "message": result.message}))
    return 0 if result.ok else 1


async def run(args: argparse.Namespace) -> int:
    if args.command == "test-credentials":
        return await check_credentials()

    try:
        output = await run_authentica_node(build_values(args))
    except AuthenticaError as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        return 1

    print(json.dumps([item.to_dict() for item in output], indent=2, ensure_ascii=False))
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--include-raw",
        action="store_true",
        help="Anexa a resposta completa da API em `raw`.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    send = sub.add_parser("send", help="Envia um OTP.")
    send.add_argument("--method", choices=("sms", "whatsapp", "email"), default="sms")
    send.add_argument("--phone", default=None, help="Telefone E.164 (sms/whatsapp).")
    send.add_argument("--email", default=None, help="Email (method=email).")

    verify = sub.add_parser("verify", help="Verifica um OTP.")
    contact = verify.add_mutually_exclusive_group(required=True)
    contact.add_argument("--phone", default=None, help="Telefone E.164.")
    contact.add_argument("--email", default=None, help="Email.")
    verify.add_argument("--otp", required=True, help="Código recebido.")

    sub.add_parser("balance", help="Consulta o saldo da conta.")
    sub.add_parser("test-credentials", help="Testa a credencial configurada.")
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    try:
        configure_app_logging()
    except AuthenticaError as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
