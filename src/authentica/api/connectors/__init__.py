"""Conectores — adapters de borda para APIs externas.

Estrutura:
- authentica/: credencial, transporte HTTP autenticado e dispatch
"""

__all__: list[str] = []
