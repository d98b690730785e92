"""Casos de uso do node Authentica."""
