"""Shared fixtures: a mocked REST client driven by sample API responses."""

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from ronin_export.client import SENT_DIRECTION, RoninRestClient


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_api(fixtures_dir: Path) -> dict[str, Any]:
    """Load canned listing pages and transactions."""
    with open(fixtures_dir / "sample_api_responses.json", "r") as f:
        return json.load(f)


def _build_mock_client(api: dict[str, Any], start_page: int = 1) -> MagicMock:
    """Build a RoninRestClient mock that serves the given canned responses."""
    client = MagicMock(spec=RoninRestClient)

    def list_transactions(address: str, direction: str, page: int) -> list[str]:
        pages = api["sent_pages"] if direction == SENT_DIRECTION else api["received_pages"]
        index = page - start_page
        return list(pages[index]) if 0 <= index < len(pages) else []

    def get_transaction(tx_hash: str) -> dict[str, Any]:
        tx = api["transactions"][tx_hash]
        return {
            "from": tx["from"],
            "to": tx["to"],
            "hash": tx_hash,
            "blockNumber": tx["blockNumber"],
        }

    client.list_transactions.side_effect = list_transactions
    client.get_transaction.side_effect = get_transaction
    client.decode_transaction.side_effect = lambda h: {"method": "transfer", "hash": h}
    client.decode_receipt.side_effect = lambda h: {"status": True, "logs": []}
    return client


@pytest.fixture
def make_mock_client() -> Callable[..., MagicMock]:
    """Factory building a RoninRestClient mock from canned API responses."""
    return _build_mock_client


@pytest.fixture
def mock_client(sample_api: dict[str, Any]) -> MagicMock:
    """Mock REST client serving the sample API responses."""
    return _build_mock_client(sample_api)
