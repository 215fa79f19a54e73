"""
Input Validation - checks for caller-supplied request parameters.

Every validator returns (is_valid, error_message) so callers can decide
whether to raise, report or skip.
"""

from typing import Any, Optional, Tuple

from eth_utils import is_hex

from ens_registrar.crypto import ADDRESS_SIZE, WORD_SIZE, is_valid_address

# =============================================================================
# Constants
# =============================================================================

MIN_AMOUNT = 0
MAX_AMOUNT = 2**256 - 1  # uint256


# =============================================================================
# Validation Functions
# =============================================================================


def validate_integer(
    value: Any,
    name: str,
    min_val: int = MIN_AMOUNT,
    max_val: int = MAX_AMOUNT,
) -> Tuple[bool, str]:
    """
    Validate integer within bounds.

    Args:
        value: Value to validate
        name: Field name for errors
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        (is_valid, error_message)
    """
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"{name} must be int, got {type(value).__name__}"

    if value < min_val:
        return False, f"{name} must be >= {min_val}, got {value}"

    if value > max_val:
        return False, f"{name} must be <= {max_val}, got {value}"

    return True, ""


def validate_amount(amount: Any, name: str = "amount") -> Tuple[bool, str]:
    """Validate a wei amount (uint256)."""
    return validate_integer(amount, name, MIN_AMOUNT, MAX_AMOUNT)


def validate_address(address: Any, name: str = "address") -> Tuple[bool, str]:
    """Validate a 0x-prefixed 20-byte address."""
    if not isinstance(address, str):
        return False, f"{name} must be str, got {type(address).__name__}"
    if not is_valid_address(address):
        return False, f"{name} must be 0x followed by {ADDRESS_SIZE * 2} hex chars"
    return True, ""


def validate_hex_string(value: Any, name: str, expected_bytes: Optional[int] = None) -> Tuple[bool, str]:
    """
    Validate a hex string (with or without 0x prefix).

    Args:
        value: Value to validate
        name: Field name
        expected_bytes: Expected byte length when decoded

    Returns:
        (is_valid, error_message)
    """
    if not isinstance(value, str):
        return False, f"{name} must be str, got {type(value).__name__}"

    hex_str = value[2:] if value.startswith(("0x", "0X")) else value

    if len(hex_str) % 2 != 0:
        return False, f"{name} has odd length, invalid hex"

    if hex_str.startswith(("0x", "0X")) or (hex_str and not is_hex(hex_str)):
        return False, f"{name} contains invalid hex characters"

    if expected_bytes is not None:
        actual_bytes = len(hex_str) // 2
        if actual_bytes != expected_bytes:
            return False, f"{name} must be {expected_bytes} bytes, got {actual_bytes}"

    return True, ""


def validate_hash(value: Any, name: str = "hash") -> Tuple[bool, str]:
    """Validate a 32-byte hash given as hex."""
    return validate_hex_string(value, name, expected_bytes=WORD_SIZE)


__all__ = [
    "validate_integer",
    "validate_amount",
    "validate_address",
    "validate_hex_string",
    "validate_hash",
    "MIN_AMOUNT",
    "MAX_AMOUNT",
]
