"""Implementações concretas dos protocolos do host para uso standalone."""
