"""
Export every transaction of a Ronin wallet to JSON.

Pipeline:
1. Page through the sent and received listings until an empty page
2. For each unique hash, fetch the transaction, its decoded input and receipt
3. Sort the records by block number (stable)
4. Write them as a JSON array to ``<address>.json``

Any failure while fetching a hash aborts the whole export.

Usage:
    from ronin_export.client import RoninRestClient
    from ronin_export.exporter import export_address, write_records

    with RoninRestClient() as client:
        records = export_address(client, address)
    write_records(records, address)
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from .client import RECEIVED_DIRECTION, SENT_DIRECTION, RoninRestClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportRecord:
    """One exported transaction with its decoded payload and receipt."""

    from_address: str
    to_address: str | None
    hash: str
    block_number: int
    input: Any
    output: Any

    def to_dict(self) -> dict[str, Any]:
        """Return the record with its output field names and order."""
        return {
            "from": self.from_address,
            "to": self.to_address,
            "hash": self.hash,
            "blockNumber": self.block_number,
            "input": self.input,
            "output": self.output,
        }


def _paginate(
    fetch_page: Callable[[int], list[str]], start_page: int, label: str
) -> list[str]:
    """
    Request pages until one comes back empty.

    A page identical to the one before it also ends the listing, so an
    endpoint that ignores the page parameter terminates.
    """
    hashes: list[str] = []
    seen: set[str] = set()
    previous_batch: list[str] | None = None
    page = start_page

    while True:
        batch = fetch_page(page)
        if not batch:
            break

        if batch == previous_batch:
            logger.warning(
                f"{label} page {page} repeated page {page - 1}, stopping pagination"
            )
            break

        for tx_hash in batch:
            if tx_hash not in seen:
                seen.add(tx_hash)
                hashes.append(tx_hash)

        logger.debug(f"{label} page {page}: {len(batch)} hashes")
        previous_batch = batch
        page += 1

    return hashes


def collect_transaction_hashes(
    client: RoninRestClient, address: str, start_page: int = 1
) -> list[str]:
    """
    Collect the hashes of all transactions sent or received by an address.

    Args:
        client: REST API client
        address: Normalized 0x address
        start_page: First page number requested from each listing

    Returns:
        Unique hashes in first-seen order, sent transactions first
    """
    sent = _paginate(
        lambda page: client.list_transactions(address, SENT_DIRECTION, page),
        start_page,
        "Sent",
    )
    received = _paginate(
        lambda page: client.list_transactions(address, RECEIVED_DIRECTION, page),
        start_page,
        "Received",
    )

    logger.info(f"Sent transactions: {len(sent)}")
    logger.info(f"Received transactions: {len(received)}")

    # dict preserves insertion order
    return list(dict.fromkeys(sent + received))


def build_record(
    client: RoninRestClient, tx_hash: str, skip_self_transfers: bool = True
) -> ExportRecord | None:
    """
    Fetch and decode a single transaction.

    Args:
        client: REST API client
        tx_hash: Transaction hash
        skip_self_transfers: Return None for transactions sent to the sender

    Returns:
        ExportRecord, or None if the transaction was skipped

    Raises:
        NetworkError: If any request fails
        DecodeError: If any response is malformed
    """
    tx = client.get_transaction(tx_hash)

    if skip_self_transfers and tx["to"] == tx["from"]:
        logger.debug(f"Skipping self transfer {tx_hash}")
        return None

    return ExportRecord(
        from_address=tx["from"],
        to_address=tx["to"],
        hash=tx_hash,
        block_number=tx["blockNumber"],
        input=client.decode_transaction(tx_hash),
        output=client.decode_receipt(tx_hash),
    )


def sort_records(records: list[ExportRecord]) -> list[ExportRecord]:
    """Sort records by block number, keeping fetch order for equal blocks."""
    return sorted(records, key=lambda record: record.block_number)


def export_address(
    client: RoninRestClient,
    address: str,
    start_page: int = 1,
    skip_self_transfers: bool = True,
) -> list[ExportRecord]:
    """
    Fetch and decode every transaction involving an address.

    Args:
        client: REST API client
        address: Normalized 0x address (see address.validate_address)
        start_page: First page number requested from each listing
        skip_self_transfers: Leave out transactions whose sender is the recipient

    Returns:
        Records sorted ascending by block number

    Raises:
        NetworkError: If any request fails
        DecodeError: If any response is malformed
    """
    hashes = collect_transaction_hashes(client, address, start_page=start_page)
    logger.info(f"Processing: {len(hashes)} unique transactions")

    records = []
    for tx_hash in hashes:
        record = build_record(client, tx_hash, skip_self_transfers=skip_self_transfers)
        if record is not None:
            records.append(record)
        logger.info(f"Completed: {tx_hash}")

    return sort_records(records)


def write_records(
    records: list[ExportRecord],
    address: str,
    output_dir: str | Path = ".",
    pretty: bool = False,
) -> Path:
    """
    Write records as a JSON array to ``<address>.json``.

    Args:
        records: Records to write, already sorted
        address: Normalized address used as the file name
        output_dir: Directory to write into (created if missing)
        pretty: Indent the JSON instead of writing it compactly

    Returns:
        Path of the written file

    Notes:
        - Overwrites an existing file at the output path
        - Output is byte-identical for identical records
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{address}.json"

    data = [record.to_dict() for record in records]

    with open(output_path, "w", encoding="utf-8") as f:
        if pretty:
            json.dump(data, f, indent=2)
        else:
            json.dump(data, f, separators=(",", ":"))

    logger.info(f"Saved {len(records)} transactions to {output_path}")
    return output_path
