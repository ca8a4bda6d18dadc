"""
Cryptographic utilities for GucciCoin
"""

from nacl.encoding import HexEncoder
from nacl.utils import random

PAYMENT_ID_BYTES = 32


class GucciCoinCrypto:
    """
    Random identifiers for correlating payments.

    Transactions are signed by the web wallet, so the SDK only needs a
    secure random source, taken from PyNaCl.
    """

    @staticmethod
    def create_payment_id() -> str:
        """
        Generate a random payment ID.

        Returns:
            64 uppercase hex characters (32 random bytes)

        Example:
            >>> payment_id = GucciCoinCrypto.create_payment_id()
            >>> client.list_transactions(payment_id)
        """
        raw = random(PAYMENT_ID_BYTES)
        return HexEncoder.encode(raw).decode('utf-8').upper()
