"""
Utility functions for GucciCoin
"""

import re
from typing import Iterable

from .models import Transaction

MIN_RECOMMENDED_FEE = 0.1
URI_SCHEME = "guccicoin"


class Utils:
    """Helper utilities for GucciCoin operations"""

    @staticmethod
    def format_balance(balance: float, decimals: int = 2) -> str:
        """
        Format balance for display.

        Args:
            balance: Balance amount
            decimals: Number of decimal places (default: 2)

        Returns:
            Formatted string with thousands separators

        Example:
            >>> Utils.format_balance(1234.5)
            '1,234.50'
        """
        return f"{balance:,.{decimals}f}"

    @staticmethod
    def format_address(address: str, head: int = 9, tail: int = 4) -> str:
        """
        Format address for display (shortened).

        Args:
            address: Full address
            head: Number of characters to keep from the start
            tail: Number of characters to keep from the end

        Returns:
            Shortened address, e.g. "gucci3VA3...9W1p"
        """
        if len(address) <= head + tail + 3:
            return address
        return f"{address[:head]}...{address[-tail:]}"

    @staticmethod
    def is_valid_payment_id(payment_id: str) -> bool:
        """
        Validate payment ID format (64 hex characters).

        Args:
            payment_id: Payment ID string

        Returns:
            True if valid, False otherwise
        """
        return bool(re.fullmatch(r'[0-9a-fA-F]{64}', payment_id))

    @staticmethod
    def meets_recommended_fee(fee: float) -> bool:
        """True if ``fee`` is at least the recommended minimum of 0.1"""
        return fee >= MIN_RECOMMENDED_FEE

    @staticmethod
    def inbound_total(transactions: Iterable[Transaction], address: str) -> float:
        """
        Sum the amounts received by ``address``.

        Only inbound line items for ``address`` count; the other records of
        the same on-chain transaction describe other addresses.

        Args:
            transactions: Transactions, usually filtered by payment ID
            address: Wallet address receiving the funds

        Returns:
            Total amount received
        """
        return sum(t.amount for t in transactions if t.inbound and t.address == address)

    @staticmethod
    def payment_uri(address: str, amount: float, payment_id: str = "") -> str:
        """
        Build a payment request URI, e.g. for a QR code.

        Example:
            >>> Utils.payment_uri("gucci3VA3", 10, "A43DF8")
            'guccicoin:gucci3VA3?amount=10&id=A43DF8'
        """
        uri = f"{URI_SCHEME}:{address}?amount={amount}"
        if payment_id:
            uri += f"&id={payment_id}"
        return uri
