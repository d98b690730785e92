"""Utilitários compartilhados do conector Authentica."""
