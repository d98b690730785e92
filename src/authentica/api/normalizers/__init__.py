"""Normalizers por API — conversão de respostas em registros de saída.

Estrutura:
- authentica/: saída de send/verify/getBalance e de erro por item
"""

__all__: list[str] = []
