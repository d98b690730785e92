"""Protocolos e contratos do núcleo do node (fronteira com o host)."""

from .credentials import CredentialStoreProtocol
from .execution_context import ExecutionContextProtocol
from .http_client import AuthenticatedHttpClientProtocol
from .models import HttpRequestOptions, NodeExecutionData
from .parameters import NodeParameterSourceProtocol

__all__ = [
    "AuthenticatedHttpClientProtocol",
    "CredentialStoreProtocol",
    "ExecutionContextProtocol",
    "HttpRequestOptions",
    "NodeExecutionData",
    "NodeParameterSourceProtocol",
]
