"""Validators por API — validação de identificadores antes do envio.

Estrutura:
- authentica/: telefone E.164 e email para OTP
"""

__all__: list[str] = []
