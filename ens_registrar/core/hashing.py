"""
Content hashing for names and sealed bids.

Both hashes use Keccak-256 but over different preimages:

    name_hash  = keccak256(utf8(name))
    secret     = keccak256(utf8(secret))                      (the reveal salt)
    bid_hash   = keccak256(name_hash || owner || value || salt)
                           32 bytes    20 bytes  32 bytes 32 bytes

The bid preimage is tightly packed (no padding on the address) and in
this exact order, because the registry recomputes it from the plaintext
reveal with sha3(hash, owner, value, salt).
"""

from typing import Any, Union

from ens_registrar.crypto import WORD_SIZE, address_to_bytes, keccak256
from ens_registrar.core.exceptions import InvalidAddress, InvalidAmount, InvalidSecret
from ens_registrar.utils.validation import validate_amount


def name_hash(normalized_name: str) -> bytes:
    """
    Registry key for a name.

    The caller must pass the normalized form; see names.prepare_name.
    """
    return keccak256(normalized_name.encode("utf-8"))


def check_secret(secret: Any) -> None:
    """
    Reject secrets that are neither text nor bytes.

    Raises:
        InvalidSecret: For any other type
    """
    if not isinstance(secret, (str, bytes, bytearray)):
        raise InvalidSecret(f"secret must be str or bytes, got {type(secret).__name__}")


def secret_hash(secret: Union[str, bytes]) -> bytes:
    """Salt committed alongside a bid, derived from the bidder's secret."""
    check_secret(secret)
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    return keccak256(bytes(secret))


def bid_hash(
    normalized_name: str,
    owner: str,
    value: int,
    secret: Union[str, bytes],
) -> bytes:
    """
    Sealed-bid commitment.

    Args:
        normalized_name: Canonical name being bid on
        owner: Address that will own the deed
        value: Bid value in wei (concealed until reveal)
        secret: Bidder's secret

    Returns:
        32-byte commitment

    Raises:
        InvalidAddress: If owner is malformed
        InvalidAmount: If value is not a uint256
        InvalidSecret: If secret is neither str nor bytes
    """
    check_secret(secret)
    valid, err = validate_amount(value, "value")
    if not valid:
        raise InvalidAmount(err)
    try:
        owner_bytes = address_to_bytes(owner)
    except ValueError as e:
        raise InvalidAddress(str(e)) from e

    preimage = (
        name_hash(normalized_name)
        + owner_bytes
        + value.to_bytes(WORD_SIZE, "big")
        + secret_hash(secret)
    )
    return keccak256(preimage)


__all__ = [
    "name_hash",
    "check_secret",
    "secret_hash",
    "bid_hash",
]
