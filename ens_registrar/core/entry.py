"""
Entry - typed snapshot of a name's auction record.

The registry returns entries as a positional tuple:

    (status, deed_address, registration_date, value, highest_bid)

decode_entry is the single place that tuple is interpreted. Nothing past
this module sees raw registry output.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, FrozenSet, Optional, Sequence

from ens_registrar.crypto import ZERO_ADDRESS, bytes_to_hex, normalize_address
from ens_registrar.core.exceptions import DecodeError, UnknownStatus
from ens_registrar.core.hashing import name_hash
from ens_registrar.utils.logger import get_logger

logger = get_logger("entry")


# =============================================================================
# Enums
# =============================================================================


class AuctionStatus(IntEnum):
    """Registry state of a name. Values are the registry's own codes."""
    OPEN = 0               # Available, no auction running
    AUCTION = 1            # Accepting sealed bids
    OWNED = 2              # Auction finalized, deed held
    FORBIDDEN = 3          # Invalidated
    REVEAL = 4             # Accepting reveals
    NOT_YET_AVAILABLE = 5  # Registry not yet accepting this name

    def allows(self, operation: str) -> bool:
        """
        Whether the client's model expects `operation` to be accepted in this status.

        Advisory only: the registry is authoritative and the client never
        blocks a request on this.
        """
        return operation in _ALLOWED_OPERATIONS.get(self, frozenset())


_ALLOWED_OPERATIONS = {
    AuctionStatus.OPEN: frozenset({"open_auction", "invalidate_name"}),
    AuctionStatus.AUCTION: frozenset({"submit_bid", "invalidate_name"}),
    AuctionStatus.REVEAL: frozenset({"unseal_bid", "finalize_auction"}),
    AuctionStatus.OWNED: frozenset({"finalize_auction", "release_deed", "transfer"}),
    AuctionStatus.FORBIDDEN: frozenset(),
    AuctionStatus.NOT_YET_AVAILABLE: frozenset(),
}


ENTRY_FIELDS = ("status", "deed_address", "registration_date", "value", "highest_bid")


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class Entry:
    """
    A name's auction record as last read from the registry.

    Attributes:
        name: Normalized name
        hash: 0x-prefixed name hash (registry key)
        status: Auction status
        deed_address: Escrow deed, zero address when none exists
        registration_date: Unix timestamp, 0 when never registered
        value: Value held by the deed (wei)
        highest_bid: Highest revealed bid (wei)
    """
    name: str
    hash: str
    status: AuctionStatus
    deed_address: str
    registration_date: int
    value: int
    highest_bid: int

    @property
    def is_registered(self) -> bool:
        """False while registration_date holds the never-registered sentinel."""
        return self.registration_date != 0

    @property
    def registered_at(self) -> Optional[datetime]:
        """Registration date as UTC datetime, or None if never registered."""
        if not self.is_registered:
            return None
        return datetime.fromtimestamp(self.registration_date, tz=timezone.utc)

    @property
    def has_deed(self) -> bool:
        return self.deed_address != ZERO_ADDRESS

    def allowed_operations(self) -> FrozenSet[str]:
        return _ALLOWED_OPERATIONS.get(self.status, frozenset())


# =============================================================================
# Decoding
# =============================================================================


def to_status(raw_status: Any) -> AuctionStatus:
    """
    Map a raw registry status code to AuctionStatus.

    Raises:
        UnknownStatus: For any code this client does not know
    """
    if isinstance(raw_status, bool) or not isinstance(raw_status, int):
        raise UnknownStatus(raw_status)
    try:
        return AuctionStatus(raw_status)
    except ValueError:
        raise UnknownStatus(raw_status) from None


def _to_uint(raw: Any, field_name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise DecodeError(f"Entry field {field_name} must be a uint, got {raw!r}")
    return raw


def decode_entry(name: str, raw: Sequence[Any]) -> Entry:
    """
    Build an Entry from the registry's raw entries() tuple.

    Args:
        name: Normalized name the tuple was fetched for
        raw: (status, deed_address, registration_date, value, highest_bid)

    Raises:
        UnknownStatus: Unrecognized status code
        DecodeError: Wrong arity or malformed field
    """
    if len(raw) != len(ENTRY_FIELDS):
        raise DecodeError(f"Expected {len(ENTRY_FIELDS)} entry fields, got {len(raw)}")

    raw_status, raw_deed, raw_date, raw_value, raw_highest = raw

    try:
        deed_address = normalize_address(raw_deed)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Entry field deed_address is not an address: {raw_deed!r}") from e

    entry = Entry(
        name=name,
        hash=bytes_to_hex(name_hash(name)),
        status=to_status(raw_status),
        deed_address=deed_address,
        registration_date=_to_uint(raw_date, "registration_date"),
        value=_to_uint(raw_value, "value"),
        highest_bid=_to_uint(raw_highest, "highest_bid"),
    )
    logger.debug(f"Decoded entry {name!r}: status={entry.status.name}, deed={entry.deed_address}")
    return entry


__all__ = [
    "AuctionStatus",
    "Entry",
    "ENTRY_FIELDS",
    "to_status",
    "decode_entry",
]
