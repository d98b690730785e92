"""Builders para envio e verificação de OTP.

Os valores seguem como informados pelo usuário; a validação apenas
descarta espaços nas bordas para conferir o formato.
"""

from __future__ import annotations

from typing import Any

from authentica.app.constants import OtpMethod, VerifyWith


class SendOtpPayloadBuilder:
    """Builder do corpo de POST /api/v2/send-otp."""

    def build(self, method: str, phone: str = "", email: str = "") -> dict[str, Any]:
        """Constrói payload com exatamente uma chave de contato.

        Args:
            method: Canal do OTP (email, sms, whatsapp)
            phone: Telefone E.164 (canais sms/whatsapp)
            email: Email (canal email)

        Returns:
            {"method": ..., "email": ...} ou {"method": ..., "phone": ...}
        """
        body: dict[str, Any] = {"method": method}
        if method == OtpMethod.EMAIL:
            body["email"] = email
        else:
            body["phone"] = phone
        return body


class VerifyOtpPayloadBuilder:
    """Builder do corpo de POST /api/v2/verify-otp."""

    def build(self, otp: str, verify_with: str, contact: str) -> dict[str, Any]:
        """Constrói payload com o código e o identificador verificado.

        Args:
            otp: Código recebido pelo usuário
            verify_with: phone ou email
            contact: Valor do identificador correspondente
        """
        body: dict[str, Any] = {"otp": otp}
        if verify_with == VerifyWith.EMAIL:
            body["email"] = contact
        else:
            body["phone"] = contact
        return body
