"""Tests for Ronin address normalization and validation."""

import pytest
from web3 import Web3

from ronin_export.address import normalize_address, validate_address
from ronin_export.exceptions import InvalidAddressError

LOWER = "0x742d35cc6634c0532925a3b844bc9e7595f0beb1"


class TestNormalizeAddress:
    """Test ronin: prefix handling."""

    def test_ronin_prefix_replaced(self):
        assert normalize_address("ronin:" + LOWER[2:]) == LOWER

    def test_0x_address_unchanged(self):
        assert normalize_address(LOWER) == LOWER

    def test_whitespace_stripped(self):
        assert normalize_address(f"  {LOWER}\n") == LOWER


class TestValidateAddress:
    """Test address format and checksum validation."""

    def test_lowercase_address_accepted(self):
        assert validate_address(LOWER) == LOWER

    def test_ronin_address_accepted(self):
        assert validate_address("ronin:" + LOWER[2:]) == LOWER

    def test_checksummed_address_accepted(self):
        checksummed = Web3.to_checksum_address(LOWER)
        assert validate_address(checksummed) == checksummed

    def test_bad_checksum_rejected(self):
        """Flipping the case of one letter in a checksummed address breaks it."""
        checksummed = Web3.to_checksum_address(LOWER)
        for index, char in enumerate(checksummed[2:], 2):
            if not char.isalpha():
                continue
            broken = (
                checksummed[:index] + char.swapcase() + checksummed[index + 1 :]
            )
            body = broken[2:]
            # All-lower or all-upper would skip checksum validation
            if body != body.lower() and body != body.upper():
                break

        with pytest.raises(InvalidAddressError, match="invalid checksum"):
            validate_address(broken)

    def test_mixed_case_without_checksum_rejected(self):
        """Valid hex in arbitrary mixed case is not a checksummed address."""
        address = "0x742D35cC6634c0532925A3b844bc9E7595F0beB1"
        assert not Web3.is_checksum_address(address)

        with pytest.raises(InvalidAddressError, match="invalid checksum"):
            validate_address(address)

    def test_uppercase_address_accepted(self):
        upper = "0x" + LOWER[2:].upper()
        assert validate_address(upper) == upper

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "0x1234",
            "hello",
            LOWER[2:],  # missing prefix
            "0x" + "g" * 40,
            LOWER + "00",
        ],
    )
    def test_malformed_addresses_rejected(self, address):
        with pytest.raises(InvalidAddressError):
            validate_address(address)

    def test_invalid_address_is_value_error(self):
        with pytest.raises(ValueError):
            validate_address("not-an-address")
