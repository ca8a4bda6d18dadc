"""
GucciCoin web wallet API clients

``WalletClient`` blocks on ``requests``; ``AsyncWalletClient`` awaits on
``aiohttp``. Both build requests and decode responses through the same
``_BaseClient`` helpers, so the two only differ in transport.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional, Type, TypeVar

import aiohttp
import requests
from loguru import logger
from pydantic import ValidationError

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientSettings
from .crypto import GucciCoinCrypto
from .exceptions import ApiError, DecodeError, TransportError
from .models import (
    ApiResponse,
    HelloResponse,
    InfoResponse,
    SendResponse,
    Transaction,
    TransactionsResponse,
    WalletInfo,
)
from .utils import MIN_RECOMMENDED_FEE, Utils

ResponseT = TypeVar('ResponseT', bound=ApiResponse)


class _BaseClient:
    """Credentials, request building and response decoding shared by both clients"""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip('/')
        self.timeout = timeout

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None, **kwargs):
        """
        Build a client from ``GUCCICOIN_*`` environment settings.

        Args:
            settings: Preloaded settings (default: read the environment)
            **kwargs: Extra constructor arguments, e.g. ``session``
        """
        if settings is None:
            settings = ClientSettings()
        return cls(
            settings.api_key.get_secret_value(),
            base_url=settings.base_url,
            timeout=settings.timeout,
            **kwargs,
        )

    @staticmethod
    def create_payment_id() -> str:
        """Generate a random 64-character hex payment ID (no network access)"""
        return GucciCoinCrypto.create_payment_id()

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    @property
    def _headers(self) -> Dict[str, str]:
        return {'Authorization': self._api_key}

    @staticmethod
    def _transactions_params(payment_id: str) -> Optional[Dict[str, str]]:
        # No query string at all when there is nothing to filter by
        return {'id': payment_id} if payment_id else None

    @staticmethod
    def _send_form(
        recipient: str,
        amount: float,
        fee: float,
        payment_id: str,
        mixin: int,
    ) -> Dict[str, str]:
        if fee < MIN_RECOMMENDED_FEE:
            logger.warning(f"Fee {fee} is below the recommended minimum of {MIN_RECOMMENDED_FEE}")
        return {
            'recipient': recipient,
            'amount': str(amount),
            'fee': str(fee),
            'paymentid': payment_id,
            'mixin': str(mixin),
        }

    @staticmethod
    def _handle_response(body: bytes) -> Dict[str, Any]:
        """
        Parse a response body and raise if the API reported a failure.

        Returns:
            The decoded JSON object

        Raises:
            DecodeError: Body is not a JSON object with a boolean ``ok``
            ApiError: ``ok`` is false
        """
        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

        envelope = _BaseClient._decode(ApiResponse, data)
        if not envelope.ok:
            if envelope.error is None:
                raise DecodeError("Failure response has no 'error' message")
            logger.warning(f"API error: {envelope.error}")
            raise ApiError(envelope.error)

        return data

    @staticmethod
    def _decode(model: Type[ResponseT], data: Dict[str, Any]) -> ResponseT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected {model.__name__} shape: {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"


class WalletClient(_BaseClient):
    """
    Blocking client for the GucciCoin web wallet API.

    Every method performs exactly one round trip; nothing is cached, so
    ``get_balance()`` followed by ``get_address()`` costs two requests.

    Example:
        >>> client = WalletClient("<YOUR API KEY>")
        >>> if client.check_connection():
        ...     print(f"Balance: {client.get_balance():.2f} GCX")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize GucciCoin client.

        Args:
            api_key: API key of the wallet, sent as the Authorization header
            base_url: API root (default: https://webwallet.guccicoin.cf/api/)
            timeout: Request timeout in seconds (default: 30)
            session: Existing requests session to reuse; it is not closed by the client
        """
        super().__init__(api_key, base_url, timeout)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Make a request and return the decoded body.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint path (e.g. '/info')
            params: Query parameters
            data: Form fields (sent form-encoded)
        """
        url = self._url(endpoint)
        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                data=data,
                headers=self._headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(str(e), status=status) from e
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
        return self._handle_response(response.content)

    def _get(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Make GET request"""
        return self._request('GET', endpoint, params=params)

    def _post(self, endpoint: str, data: Dict[str, str]) -> Dict[str, Any]:
        """Make form-encoded POST request"""
        return self._request('POST', endpoint, data=data)

    # Raw responses

    def raw_hello(self) -> Dict[str, Any]:
        """Fetch ``/hello`` and return the decoded JSON body"""
        return self._get('/hello')

    def raw_info(self) -> Dict[str, Any]:
        """Fetch ``/info`` and return the decoded JSON body"""
        return self._get('/info')

    def raw_transactions(self, payment_id: str = "") -> Dict[str, Any]:
        """Fetch ``/transactions``, optionally filtered by payment ID"""
        return self._get('/transactions', self._transactions_params(payment_id))

    def raw_send(
        self,
        recipient: str,
        amount: float,
        fee: float,
        payment_id: str = "",
        mixin: int = 0
    ) -> Dict[str, Any]:
        """Post to ``/send`` and return the decoded JSON body"""
        return self._post('/send', self._send_form(recipient, amount, fee, payment_id, mixin))

    # Wallet

    def check_connection(self) -> bool:
        """
        Check that the API is reachable and the key is accepted.

        Returns:
            True if ``/hello`` answered ``"world"``

        Raises:
            GucciCoinError: On transport, decode or API failure
        """
        response = self._decode(HelloResponse, self.raw_hello())
        return response.hello == "world"

    def fetch_info(self) -> WalletInfo:
        """
        Get the wallet address and balances.

        Returns:
            WalletInfo object
        """
        return self._decode(InfoResponse, self.raw_info()).to_wallet_info()

    def get_balance(self) -> float:
        """Confirmed, spendable balance"""
        return self.fetch_info().available_balance

    def get_unconfirmed_balance(self) -> float:
        """Balance that cannot be spent until confirmed"""
        return self.fetch_info().locked_amount

    def get_address(self) -> str:
        """Address of the wallet"""
        return self.fetch_info().address

    # Transactions

    def list_transactions(self, payment_id: str = "") -> List[Transaction]:
        """
        Get transactions to/from the wallet in the last 1000 blocks.

        Args:
            payment_id: Only return transactions with this payment ID

        Returns:
            List of Transaction objects in the order the API returned them
        """
        response = self._decode(TransactionsResponse, self.raw_transactions(payment_id))
        return list(response.transactions)

    def send_transaction(
        self,
        recipient: str,
        amount: float,
        fee: float,
        payment_id: str = "",
        mixin: int = 1
    ) -> str:
        """
        Create a new transaction and broadcast it.

        Args:
            recipient: Address to send funds to
            amount: Amount of GucciCoin to send
            fee: Transaction fee (0.1 minimum recommended)
            payment_id: Payment ID to attach
            mixin: Number of decoy inputs (change this if sends keep failing)

        Returns:
            Hash of the broadcast transaction
        """
        response = self._decode(SendResponse, self.raw_send(recipient, amount, fee, payment_id, mixin))
        return response.hash

    def payment_received(self, payment_id: str, amount: float) -> bool:
        """
        Check whether at least ``amount`` has arrived for ``payment_id``.

        Costs two round trips when matching transactions exist, one otherwise.
        """
        if not payment_id:
            raise ValueError("payment_id is required")
        transactions = self.list_transactions(payment_id)
        if not transactions:
            return False
        address = self.get_address()
        return Utils.inbound_total(transactions, address) >= amount

    def close(self):
        """Close the session"""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, *args):
        """Context manager exit"""
        self.close()


class AsyncWalletClient(_BaseClient):
    """
    Asynchronous client for the GucciCoin web wallet API.

    Same operations as ``WalletClient``, as coroutines. The aiohttp session
    is created on first use inside the running event loop.

    Example:
        >>> async with AsyncWalletClient("<YOUR API KEY>") as client:
        ...     transactions = await client.list_transactions(payment_id)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        super().__init__(api_key, base_url, timeout)
        self._owns_session = session is None
        self._session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession()
        elif self._session.closed:
            raise TransportError("The aiohttp session passed to the client is closed")
        return self._session

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        url = self._url(endpoint)
        logger.debug(f"{method} {url} params={params}")
        session = await self._get_session()
        try:
            async with session.request(
                method,
                url,
                params=params,
                data=data,
                headers=self._headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                response.raise_for_status()
                body = await response.read()
        except aiohttp.ClientResponseError as e:
            raise TransportError(str(e), status=e.status) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(str(e) or type(e).__name__) from e
        return self._handle_response(body)

    async def _get(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return await self._request('GET', endpoint, params=params)

    async def _post(self, endpoint: str, data: Dict[str, str]) -> Dict[str, Any]:
        return await self._request('POST', endpoint, data=data)

    async def raw_hello(self) -> Dict[str, Any]:
        return await self._get('/hello')

    async def raw_info(self) -> Dict[str, Any]:
        return await self._get('/info')

    async def raw_transactions(self, payment_id: str = "") -> Dict[str, Any]:
        return await self._get('/transactions', self._transactions_params(payment_id))

    async def raw_send(
        self,
        recipient: str,
        amount: float,
        fee: float,
        payment_id: str = "",
        mixin: int = 0
    ) -> Dict[str, Any]:
        return await self._post('/send', self._send_form(recipient, amount, fee, payment_id, mixin))

    async def check_connection(self) -> bool:
        """True if ``/hello`` answered ``"world"``; failures raise"""
        response = self._decode(HelloResponse, await self.raw_hello())
        return response.hello == "world"

    async def fetch_info(self) -> WalletInfo:
        return self._decode(InfoResponse, await self.raw_info()).to_wallet_info()

    async def get_balance(self) -> float:
        return (await self.fetch_info()).available_balance

    async def get_unconfirmed_balance(self) -> float:
        return (await self.fetch_info()).locked_amount

    async def get_address(self) -> str:
        return (await self.fetch_info()).address

    async def list_transactions(self, payment_id: str = "") -> List[Transaction]:
        """Transactions in the last 1000 blocks, optionally filtered by payment ID"""
        response = self._decode(TransactionsResponse, await self.raw_transactions(payment_id))
        return list(response.transactions)

    async def send_transaction(
        self,
        recipient: str,
        amount: float,
        fee: float,
        payment_id: str = "",
        mixin: int = 1
    ) -> str:
        """Broadcast a transaction and return its hash"""
        response = self._decode(
            SendResponse,
            await self.raw_send(recipient, amount, fee, payment_id, mixin),
        )
        return response.hash

    async def payment_received(self, payment_id: str, amount: float) -> bool:
        """Check whether at least ``amount`` has arrived for ``payment_id``"""
        if not payment_id:
            raise ValueError("payment_id is required")
        transactions = await self.list_transactions(payment_id)
        if not transactions:
            return False
        address = await self.get_address()
        return Utils.inbound_total(transactions, address) >= amount

    async def close(self):
        """Close the session if the client created it"""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()
