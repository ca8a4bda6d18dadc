"""
Data models for GucciCoin SDK

The API speaks camelCase JSON; models expose snake_case attributes and
accept either spelling on construction. Field types are strict: a
string where the API should send a number or boolean is rejected, not
converted.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class WalletInfo(_Model):
    """Wallet address and balances, fetched fresh from ``/info``"""
    address: StrictStr
    available_balance: StrictFloat = Field(alias="availableBalance")
    locked_amount: StrictFloat = Field(alias="lockedAmount")


class Transaction(_Model):
    """
    One line item from ``/transactions``.

    A single on-chain transaction may show up as several records, one per
    affected address. Filter on ``inbound`` and ``address`` to get totals
    relative to a wallet (see ``Utils.inbound_total``).
    """
    transaction_hash: StrictStr = Field(alias="transactionHash")
    block_hash: StrictStr = Field(alias="blockHash")
    block_index: StrictInt = Field(alias="blockIndex")
    transaction_amount: StrictFloat = Field(alias="transactionAmount")
    fee: StrictFloat
    extra: StrictStr
    is_base: StrictBool = Field(alias="isBase")
    payment_id: StrictStr = Field(alias="paymentId")
    state: StrictInt
    timestamp: StrictInt
    address: StrictStr
    amount: StrictFloat
    type: StrictInt
    inbound: StrictBool
    unlock_time: StrictInt = Field(alias="unlockTime")


# Response envelopes

class ApiResponse(_Model):
    """Fields every response carries"""
    ok: StrictBool
    error: Optional[StrictStr] = None


class HelloResponse(ApiResponse):
    hello: StrictStr


class Balance(_Model):
    available_balance: StrictFloat = Field(alias="availableBalance")
    locked_amount: StrictFloat = Field(alias="lockedAmount")


class InfoResponse(ApiResponse):
    address: StrictStr
    balance: Balance

    def to_wallet_info(self) -> WalletInfo:
        return WalletInfo(
            address=self.address,
            available_balance=self.balance.available_balance,
            locked_amount=self.balance.locked_amount,
        )


class TransactionsResponse(ApiResponse):
    transactions: List[Transaction]


class SendResponse(ApiResponse):
    hash: StrictStr
