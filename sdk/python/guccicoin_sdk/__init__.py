"""
GucciCoin Python SDK

Python client for the GucciCoin web wallet API.

Features:
- Blocking and asyncio clients with type hints
- Typed, validated responses
- Payment ID generation
- Payment tracking helpers

Logging goes through loguru and is off by default; turn it on with
``logger.enable("guccicoin_sdk")``.
"""

from loguru import logger

__version__ = "1.0.0"
__author__ = "GucciCoin Team"

from .client import AsyncWalletClient, WalletClient
from .config import ClientSettings
from .crypto import GucciCoinCrypto
from .exceptions import (
    ApiError,
    DecodeError,
    ErrorKind,
    GucciCoinError,
    TransportError,
)
from .models import (
    WalletInfo,
    Transaction,
)
from .utils import Utils

logger.disable(__name__)

create_payment_id = GucciCoinCrypto.create_payment_id

__all__ = [
    "WalletClient",
    "AsyncWalletClient",
    "ClientSettings",
    "GucciCoinCrypto",
    "WalletInfo",
    "Transaction",
    "GucciCoinError",
    "ErrorKind",
    "TransportError",
    "DecodeError",
    "ApiError",
    "Utils",
    "create_payment_id",
]
