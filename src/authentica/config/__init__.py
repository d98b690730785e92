"""Configuração do conector Authentica (settings e logging)."""
