"""
Ronin REST API client.

This module provides:
- HTTP session management with a naive exponential-backoff retry
- Typed access to the listing, lookup and decode endpoints
- Mapping of transport and payload failures onto NetworkError/DecodeError
"""

import logging
import time
from typing import Any, Callable, TypeVar

import requests
import requests.exceptions

from .exceptions import DecodeError, NetworkError

# Configure module logger
logger = logging.getLogger(__name__)

# Type variable for generic retry helper
T = TypeVar("T")

DEFAULT_BASE_URL = "https://ronin.rest"

SENT_DIRECTION = "sent"
RECEIVED_DIRECTION = "received"

_LISTING_PATHS = {
    SENT_DIRECTION: "/archive/listSentTransactions/{address}",
    RECEIVED_DIRECTION: "/archive/listReceivedTransactions/{address}",
}


def _is_transient(error: requests.exceptions.RequestException) -> bool:
    """Return True for failures worth retrying (connection, timeout, 429, 5xx)."""
    if isinstance(error, requests.exceptions.HTTPError):
        response = error.response
        if response is None:
            return True
        return response.status_code == 429 or response.status_code >= 500
    return isinstance(
        error, (requests.exceptions.ConnectionError, requests.exceptions.Timeout)
    )


class RoninRestClient:
    """
    Client for the Ronin REST API with automatic retry logic.

    Transient failures are retried with exponential backoff; once retries
    are exhausted the failure surfaces as NetworkError. Responses that are
    not the expected JSON surface as DecodeError.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        max_retries: int = 3,
        backoff_factor: float = 2.0,
        session: requests.Session | None = None,
    ):
        """
        Initialize the REST client.

        Args:
            base_url: API host (e.g., https://ronin.rest)
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts per request
            backoff_factor: Exponential backoff multiplier (delay = backoff_factor^attempt)
            session: Optional pre-configured requests session

        Raises:
            ValueError: If base URL is empty or max_retries is not positive
        """
        if not base_url:
            raise ValueError("Invalid base URL. Please configure api.base_url")
        if max_retries <= 0:
            raise ValueError(f"max_retries must be positive, got {max_retries}")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.session = session if session is not None else requests.Session()

        logger.debug(f"Using Ronin REST API at {self.base_url}")

    def __enter__(self) -> "RoninRestClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def retry_with_backoff(
        self, func: Callable[..., T], *args: Any, **kwargs: Any
    ) -> T:
        """
        Execute function with exponential backoff retry logic.

        Retries the function on transient errors (network issues, 429 and
        5xx responses) with exponentially increasing delays between attempts.

        Args:
            func: Function to execute
            *args: Positional arguments for the function
            **kwargs: Keyword arguments for the function

        Returns:
            Result from successful function execution

        Raises:
            NetworkError: On a non-transient HTTP error, or once all
                retries are exhausted
        """
        last_exception: Exception | None = None

        for attempt in range(self.max_retries):
            try:
                return func(*args, **kwargs)

            except requests.exceptions.RequestException as e:
                if not _is_transient(e):
                    raise NetworkError(f"Request failed: {e}") from e

                last_exception = e

                if attempt < self.max_retries - 1:
                    delay = self.backoff_factor**attempt
                    logger.warning(
                        f"Request failed (attempt {attempt + 1}/{self.max_retries}): {e}. "
                        f"Retrying in {delay:.2f} seconds..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(
                        f"Request failed after {self.max_retries} attempts: {e}"
                    )

        raise NetworkError(
            f"Request failed after {self.max_retries} attempts: {last_exception}"
        ) from last_exception

    def _send(self, url: str, params: dict[str, Any] | None) -> requests.Response:
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET a path relative to the base URL and return the parsed JSON body.

        Args:
            path: Endpoint path starting with "/"
            params: Optional query parameters

        Returns:
            Parsed JSON value

        Raises:
            NetworkError: If the request fails after all retries
            DecodeError: If the body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        response = self.retry_with_backoff(self._send, url, params)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON from {url}: {e}") from e

    def list_transactions(self, address: str, direction: str, page: int) -> list[str]:
        """
        Fetch one page of transaction hashes for an address.

        Args:
            address: Normalized 0x address
            direction: "sent" or "received"
            page: Page number

        Returns:
            List of transaction hashes; empty when past the last page

        Raises:
            ValueError: If direction is unknown
            DecodeError: If the response lacks a "transactions" list of strings
        """
        if direction not in _LISTING_PATHS:
            raise ValueError(
                f"direction must be '{SENT_DIRECTION}' or '{RECEIVED_DIRECTION}', "
                f"got {direction}"
            )

        path = _LISTING_PATHS[direction].format(address=address)
        data = self.get_json(path, params={"page": page})

        transactions = data.get("transactions") if isinstance(data, dict) else None
        if not isinstance(transactions, list) or not all(
            isinstance(tx_hash, str) for tx_hash in transactions
        ):
            raise DecodeError(
                f"Malformed {direction} transaction listing for {address} "
                f"(page {page}): expected a 'transactions' list of hashes"
            )

        return transactions

    def list_sent_transactions(self, address: str, page: int) -> list[str]:
        """Fetch one page of hashes sent from the address."""
        return self.list_transactions(address, SENT_DIRECTION, page)

    def list_received_transactions(self, address: str, page: int) -> list[str]:
        """Fetch one page of hashes received by the address."""
        return self.list_transactions(address, RECEIVED_DIRECTION, page)

    def get_transaction(self, tx_hash: str) -> dict[str, Any]:
        """
        Fetch the summary of a transaction.

        Args:
            tx_hash: Transaction hash

        Returns:
            Dictionary with "from", "to", "hash" and integer "blockNumber"

        Raises:
            DecodeError: If required fields are missing or malformed
        """
        data = self.get_json(f"/ronin/getTransaction/{tx_hash}")

        if not isinstance(data, dict) or "from" not in data or "blockNumber" not in data:
            raise DecodeError(
                f"Malformed transaction {tx_hash}: expected 'from' and 'blockNumber'"
            )

        return {
            "from": data["from"],
            "to": data.get("to"),
            "hash": data.get("hash", tx_hash),
            "blockNumber": _parse_block_number(data["blockNumber"], tx_hash),
        }

    def decode_transaction(self, tx_hash: str) -> Any:
        """Fetch the decoded method call of a transaction, returned verbatim."""
        return self.get_json(f"/ronin/decodeTransaction/{tx_hash}")

    def decode_receipt(self, tx_hash: str) -> Any:
        """Fetch the decoded receipt of a transaction, returned verbatim."""
        return self.get_json(f"/ronin/decodeTransactionReceipt/{tx_hash}")


def _parse_block_number(value: Any, tx_hash: str) -> int:
    """Accept integer, decimal string or 0x-prefixed hex string block numbers."""
    if isinstance(value, bool):
        raise DecodeError(f"Invalid blockNumber for {tx_hash}: {value!r}")
    if isinstance(value, int):
        block_number = value
    elif isinstance(value, str):
        is_hex = value[:2].lower() == "0x"
        try:
            block_number = int(value, 16) if is_hex else int(value, 10)
        except ValueError as e:
            raise DecodeError(f"Invalid blockNumber for {tx_hash}: {value!r}") from e
    else:
        raise DecodeError(f"Invalid blockNumber for {tx_hash}: {value!r}")

    if block_number < 0:
        raise DecodeError(f"Negative blockNumber for {tx_hash}: {block_number}")
    return block_number
