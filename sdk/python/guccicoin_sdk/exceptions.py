"""
Exceptions raised by the GucciCoin SDK
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Which stage of a request failed"""
    TRANSPORT = "transport"
    DECODE = "decode"
    API = "api"


class GucciCoinError(Exception):
    """Base exception class for SDK errors"""
    kind: ErrorKind


class TransportError(GucciCoinError):
    """Raised when the request could not complete (network, TLS, timeout, HTTP status)"""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class DecodeError(GucciCoinError):
    """Raised when a response body is not valid JSON or has the wrong shape"""
    kind = ErrorKind.DECODE


class ApiError(GucciCoinError):
    """Raised when the API answers with ``ok: false``"""
    kind = ErrorKind.API

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
