"""Camada de borda com a API Authentica."""
