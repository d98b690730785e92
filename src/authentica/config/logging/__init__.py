"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from authentica.config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap / CLI)
    configure_logging(level="INFO", service_name="authentica")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("authentica_request_ok", extra={"status_code": 200})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Nunca logar API key, telefone, email ou código OTP.
"""

from authentica.config.logging.config import configure_logging, get_logger
from authentica.config.logging.filters import CorrelationIdFilter
from authentica.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]
