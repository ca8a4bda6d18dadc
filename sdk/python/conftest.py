"""Shared fixtures: canned API bodies and mocked HTTP sessions."""

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
import requests

ADDRESS = "gucci3VA3eMd62N4DXM77M4K9FhPuLjW5VEMNmY8zdoSG8BUStCLsH6ZUK6LKTXrWzHbgLwxkF6oANLkd7NiTawtaBDG3n1P59W1p"


def transaction_json(**overrides):
    data = {
        "transactionHash": "a1" * 32,
        "blockHash": "b2" * 32,
        "blockIndex": 120345,
        "transactionAmount": 10.1,
        "fee": 0.1,
        "extra": "01ab",
        "isBase": False,
        "paymentId": "5D60FF" + "0" * 58,
        "state": 0,
        "timestamp": 1544879268,
        "address": ADDRESS,
        "amount": 10.0,
        "type": 1,
        "inbound": True,
        "unlockTime": 0,
    }
    data.update(overrides)
    return data


@pytest.fixture
def info_body():
    return {
        "ok": True,
        "address": ADDRESS,
        "balance": {"availableBalance": 12.5, "lockedAmount": 3.25},
    }


@pytest.fixture
def transactions_body():
    return {
        "ok": True,
        "transactions": [
            transaction_json(),
            transaction_json(
                transactionHash="c3" * 32,
                address="gucciOTHER",
                amount=0.1,
                inbound=False,
                isBase=True,
                state=2,
                type=0,
                unlockTime=40,
            ),
        ],
    }


@pytest.fixture
def http_response():
    """Factory for fake ``requests`` responses."""
    def make(body, status=200):
        response = MagicMock()
        if not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        response.content = body.encode("utf-8") if isinstance(body, str) else body
        response.status_code = status
        if status >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status} Client Error", response=response
            )
        return response
    return make


@pytest.fixture
def aiohttp_context():
    """Factory for fake ``aiohttp`` request context managers."""
    def make(body, status=200):
        response = MagicMock()
        response.status = status
        if not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        response.read = AsyncMock(return_value=body.encode("utf-8") if isinstance(body, str) else body)
        if status >= 400:
            response.raise_for_status.side_effect = aiohttp.ClientResponseError(
                MagicMock(), (), status=status, message="Unauthorized"
            )
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=response)
        context.__aexit__ = AsyncMock(return_value=False)
        return context
    return make


@pytest.fixture
def session():
    """Mocked ``requests.Session``."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def async_session():
    """Mocked ``aiohttp.ClientSession``."""
    mock = MagicMock()
    mock.closed = False
    mock.close = AsyncMock()
    return mock
