"""Payload builders por API — construção de corpos de requisição.

Estrutura:
- authentica/: send-otp e verify-otp
"""

__all__: list[str] = []
