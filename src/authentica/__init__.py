"""Conector Authentica — OTP e saldo de conta via API Authentica.

Camadas:
- api/: borda com a API Authentica (credencial, transporte, validadores,
  builders de payload, normalizers de resposta)
- app/: núcleo do node (descrição, execução por item, protocolos do host)
- config/: settings e logging estruturado
- utils/: exceções compartilhadas
"""

__version__ = "1.0.0"
