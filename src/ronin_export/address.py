"""
Ronin address normalization and validation.

Ronin wallets display addresses as ``ronin:<40 hex>``; the REST API and
the EVM underneath expect the ``0x`` form. Validation follows the
EIP-55 rules: all-lowercase and all-uppercase addresses are accepted,
mixed-case addresses must carry a valid EIP-55 checksum.
"""

import logging

from eth_utils import is_hex_address
from web3 import Web3

from .exceptions import InvalidAddressError

logger = logging.getLogger(__name__)

RONIN_PREFIX = "ronin:"
ADDRESS_LENGTH = 42  # 0x + 40 hex chars


def normalize_address(address: str) -> str:
    """
    Convert a Ronin-style address to its ``0x`` form.

    Args:
        address: Address as entered by the user

    Returns:
        Address with surrounding whitespace removed and a ``ronin:``
        prefix replaced by ``0x``
    """
    address = address.strip()
    if address.startswith(RONIN_PREFIX):
        address = "0x" + address[len(RONIN_PREFIX) :]
    return address


def validate_address(address: str) -> str:
    """
    Normalize an address and check that it is a valid Ronin address.

    Args:
        address: Address in ``ronin:`` or ``0x`` form

    Returns:
        The normalized ``0x`` address

    Raises:
        InvalidAddressError: If the address is malformed or fails the
            checksum
    """
    normalized = normalize_address(address)

    if not normalized.startswith("0x") or len(normalized) != ADDRESS_LENGTH:
        raise InvalidAddressError(f"Failed to parse address: {address!r}")

    if not is_hex_address(normalized):
        raise InvalidAddressError(f"Failed to parse address: {address!r} (invalid hex)")

    body = normalized[2:]
    is_mixed_case = body != body.lower() and body != body.upper()
    if is_mixed_case and not Web3.is_checksum_address(normalized):
        raise InvalidAddressError(
            f"Failed to parse address: {address!r} (invalid checksum)"
        )

    logger.debug(f"Validated address {normalized}")
    return normalized
