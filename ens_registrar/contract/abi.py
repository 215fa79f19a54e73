"""
ABI codec - call data encoding for the registry contract.

Thin layer over eth-abi restricted to the types the registry surface
uses:

    bytes32, address, uint<N>, bool     static, one 32-byte head word
    string                              dynamic, head offset + tail

Call data layout:
    selector (4) | head words (32 each) | tail

Values come back in the shapes the rest of the client works with:
bytes32 as bytes, address as a lower-case 0x string, uint as int.
"""

import re
from typing import Any, Sequence, Tuple, Union

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError
from eth_utils import decode_hex, function_signature_to_4byte_selector, to_normalized_address

from ens_registrar.crypto import WORD_SIZE

SELECTOR_SIZE = 4

_SUPPORTED_TYPE = re.compile(r"^(?:bytes32|address|bool|string|uint(?P<bits>\d{1,3}))$")


class AbiError(ValueError):
    """A value that cannot be encoded, or data that cannot be decoded."""


# =============================================================================
# Helpers
# =============================================================================


def function_signature(name: str, input_types: Sequence[str]) -> str:
    """Canonical signature, e.g. 'entries(bytes32)'."""
    return f"{name}({','.join(input_types)})"


def function_selector(signature: str) -> bytes:
    """First 4 bytes of keccak256 of the canonical signature."""
    return function_signature_to_4byte_selector(signature)


def _check_type(abi_type: str) -> None:
    match = _SUPPORTED_TYPE.match(abi_type)
    if match is None:
        raise AbiError(f"Unsupported type: {abi_type}")
    bits = match.group("bits")
    if bits is not None and (int(bits) % 8 != 0 or not 8 <= int(bits) <= 256):
        raise AbiError(f"Unsupported type: {abi_type}")


def _to_bytes(data: Union[bytes, str]) -> bytes:
    if isinstance(data, str):
        try:
            return decode_hex(data)
        except ValueError as e:
            raise AbiError(f"Invalid hex data: {e}") from e
    return bytes(data)


def _prepare_value(abi_type: str, value: Any) -> Any:
    # eth-abi right-pads short bytesN values; a registry key must be exact
    if abi_type == "bytes32":
        raw = _to_bytes(value) if isinstance(value, str) else value
        if not isinstance(raw, (bytes, bytearray)) or len(raw) != WORD_SIZE:
            size = len(raw) if isinstance(raw, (bytes, bytearray)) else type(raw).__name__
            raise AbiError(f"bytes32 value must be 32 bytes, got {size}")
        return bytes(raw)
    return value


# =============================================================================
# Encoding
# =============================================================================


def encode_arguments(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """
    ABI-encode a list of arguments (head/tail layout).

    Raises:
        AbiError: On arity mismatch or a value that does not fit its type
    """
    if len(types) != len(values):
        raise AbiError(f"Expected {len(types)} arguments, got {len(values)}")
    for abi_type in types:
        _check_type(abi_type)

    prepared = [_prepare_value(t, v) for t, v in zip(types, values)]
    try:
        return encode(list(types), prepared)
    except EncodingError as e:
        raise AbiError(str(e)) from e


def encode_call(signature: str, types: Sequence[str], values: Sequence[Any]) -> bytes:
    """Selector followed by encoded arguments."""
    return function_selector(signature) + encode_arguments(types, values)


# =============================================================================
# Decoding
# =============================================================================


def decode_values(types: Sequence[str], data: Union[bytes, str]) -> Tuple[Any, ...]:
    """
    Decode ABI-encoded values into a raw tuple.

    Padding is checked strictly: dirty address or bool words and
    truncated data are errors.

    Raises:
        AbiError: On truncated or malformed data
    """
    data = _to_bytes(data)
    for abi_type in types:
        _check_type(abi_type)

    try:
        values = decode(list(types), data)
    except (DecodingError, UnicodeDecodeError) as e:
        raise AbiError(str(e)) from e

    return tuple(
        to_normalized_address(value) if abi_type == "address" else value
        for abi_type, value in zip(types, values)
    )


def split_call(data: Union[bytes, str]) -> Tuple[bytes, bytes]:
    """Split call data into (selector, encoded arguments)."""
    data = _to_bytes(data)
    if len(data) < SELECTOR_SIZE:
        raise AbiError("Call data shorter than a selector")
    return data[:SELECTOR_SIZE], data[SELECTOR_SIZE:]


__all__ = [
    "AbiError",
    "function_signature",
    "function_selector",
    "encode_arguments",
    "encode_call",
    "decode_values",
    "split_call",
    "SELECTOR_SIZE",
]
