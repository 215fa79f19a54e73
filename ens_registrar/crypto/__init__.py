"""
Cryptographic primitives for the registrar client.

This module provides:
- Keccak-256 (the registry's hash primitive)
- Hex conversion helpers
- Address parsing and formatting

Design Notes:
-------------
The registry recomputes every hash on its side with Keccak-256 (the
pre-standard SHA-3 variant used by the EVM). NIST SHA3-256 pads
differently and produces different digests, so it must never be used in
its place.
"""

from Crypto.Hash import keccak
from eth_utils import decode_hex, is_address, to_canonical_address, to_normalized_address


# =============================================================================
# Constants
# =============================================================================

ADDRESS_SIZE = 20
WORD_SIZE = 32

ZERO_ADDRESS = "0x" + "00" * ADDRESS_SIZE


# =============================================================================
# Hashing
# =============================================================================


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash (Ethereum-style).

    Used for: name hashes, bid commitments, secret salts.
    """
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()


# =============================================================================
# Utility Functions
# =============================================================================


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to hex string with 0x prefix."""
    return "0x" + data.hex()


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string (with or without 0x prefix) to bytes.

    Raises:
        ValueError: If the string holds anything but hex digits
    """
    return decode_hex(hex_str)


def is_valid_address(address: str) -> bool:
    """
    Check if string is a 0x-prefixed address of exactly 40 hex digits.

    Mixed-case input must carry a valid EIP-55 checksum.
    """
    if not isinstance(address, str):
        return False
    if not address.startswith(("0x", "0X")):
        return False
    return is_address(address)


def address_to_bytes(address: str) -> bytes:
    """
    Parse a 0x-prefixed address into its 20 raw bytes.

    Raises:
        ValueError: If the address is malformed
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid address: {address!r}")
    return to_canonical_address(address)


def normalize_address(address: str) -> str:
    """Lower-case, 0x-prefixed form of an address."""
    if not is_valid_address(address):
        raise ValueError(f"Invalid address: {address!r}")
    return to_normalized_address(address)

__all__ = [
    "keccak256",
    "bytes_to_hex",
    "hex_to_bytes",
    "is_valid_address",
    "address_to_bytes",
    "normalize_address",
    "ADDRESS_SIZE",
    "WORD_SIZE",
    "ZERO_ADDRESS",
]
