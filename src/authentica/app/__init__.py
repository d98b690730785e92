"""Núcleo do node Authentica: protocolos do host, descrição e execução."""
