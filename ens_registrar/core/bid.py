"""
Bid Factory - offline construction of sealed bids.

A bid is built without any network access so that the commitment can be
computed (and stored) long before it is submitted, possibly from a
different process.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ens_registrar.crypto import bytes_to_hex, normalize_address
from ens_registrar.core.config import DEFAULT_MIN_NAME_LENGTH
from ens_registrar.core.exceptions import InvalidAddress, InvalidBidHash, InvalidDeposit, InvalidSecret
from ens_registrar.core.hashing import bid_hash, secret_hash
from ens_registrar.core.names import prepare_name
from ens_registrar.utils.logger import get_logger
from ens_registrar.utils.validation import validate_amount, validate_hash

logger = get_logger("bid")


@dataclass(frozen=True)
class Bid:
    """
    A sealed bid ready for submission.

    sha_bid depends on (name, owner, value, secret) only; deposit is the
    amount sent with the commitment and must cover value for the reveal
    to succeed.
    """
    name: str
    owner: str
    value: int
    secret: str
    deposit: int
    sha_bid: str

    @property
    def salt(self) -> str:
        """Hex salt the registry expects at reveal time."""
        return bytes_to_hex(secret_hash(self.secret))

    @property
    def is_underfunded(self) -> bool:
        return self.deposit < self.value

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], min_length: int = DEFAULT_MIN_NAME_LENGTH) -> "Bid":
        """
        Rebuild a bid saved with to_dict.

        The commitment is recomputed and must match the stored sha_bid.

        Raises:
            InvalidBidHash: If the stored sha_bid is malformed or stale
        """
        bid = make_bid(
            name=data["name"],
            owner=data["owner"],
            value=data["value"],
            secret=data["secret"],
            deposit=data["deposit"],
            min_length=min_length,
        )
        stored = data.get("sha_bid")
        if stored is not None:
            valid, err = validate_hash(stored, "sha_bid")
            if not valid or stored.lower() != bid.sha_bid:
                raise InvalidBidHash(f"Stored sha_bid {stored!r} does not match bid contents")
        return bid


def make_bid(
    name: str,
    owner: str,
    value: int,
    secret: str,
    deposit: int,
    min_length: int = DEFAULT_MIN_NAME_LENGTH,
) -> Bid:
    """
    Create a sealed bid.

    Amounts are integers in wei. Floats are rejected even when whole
    (write 10**18, not 1e18), since a float cannot hold every uint256.

    Args:
        name: Name to bid on (any case/width variant)
        owner: Address that will own the deed
        value: Bid value in wei (int)
        secret: Bidder's secret as text, needed again at reveal
        deposit: Wei sent with the commitment (int)
        min_length: Registry minimum label length

    Returns:
        Bid with its commitment hash

    Raises:
        TooShort / SpecialCharacters: Invalid name
        InvalidDeposit: Negative or non-integer deposit
        InvalidAmount: Malformed value
        InvalidAddress: Malformed owner
        InvalidSecret: Secret is not a str
    """
    normalized = prepare_name(name, min_length)

    if not isinstance(secret, str):
        raise InvalidSecret(f"secret must be str, got {type(secret).__name__}")

    valid, err = validate_amount(deposit, "deposit")
    if not valid:
        raise InvalidDeposit(err)

    try:
        owner = normalize_address(owner)
    except (TypeError, ValueError) as e:
        raise InvalidAddress(f"Invalid owner address: {owner!r}") from e

    sha_bid = bytes_to_hex(bid_hash(normalized, owner, value, secret))

    bid = Bid(
        name=normalized,
        owner=owner,
        value=value,
        secret=secret,
        deposit=deposit,
        sha_bid=sha_bid,
    )

    if bid.is_underfunded:
        logger.warning(f"Deposit {deposit} is below bid value {value} for {normalized!r}; "
                       f"the reveal will be rejected by the registry")

    logger.debug(f"Created bid {sha_bid[:18]}... for {normalized!r}")
    return bid


__all__ = [
    "Bid",
    "make_bid",
]
