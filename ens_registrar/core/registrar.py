"""
Registrar - client for the sealed-bid name auction registry.

Every operation follows the same pipeline:

    validate name -> normalize -> hash -> encode -> transport -> decode

Local errors (TooShort, SpecialCharacters, InvalidDeposit, ...) are
raised before anything is hashed or sent. Everything the registry or the
transport reports is passed back to the caller unchanged: the registry
is the only authority on auction timing, ownership and refunds.

Lifecycle of a name as seen from the client:

    OPEN --open_auction--> AUCTION --submit_bid*--> REVEAL --unseal_bid-->
    OWNED --finalize_auction--> OWNED

    OPEN/AUCTION --invalidate_name--> FORBIDDEN
    OWNED --release_deed--> OPEN
"""

import asyncio
from typing import Any, Awaitable, Mapping, Optional, TypeVar, Union

from ens_registrar.contract.registry import RegistryContract
from ens_registrar.contract.transport import Transport, TxParams
from ens_registrar.crypto import bytes_to_hex, normalize_address
from ens_registrar.core.bid import Bid
from ens_registrar.core.config import DEFAULT_MIN_NAME_LENGTH, RegistrarConfig
from ens_registrar.core.entry import Entry, decode_entry
from ens_registrar.core.exceptions import (
    InvalidAddress,
    InvalidAmount,
    InvalidBidHash,
    InvalidDeposit,
)
from ens_registrar.core.hashing import check_secret, name_hash, secret_hash
from ens_registrar.core.names import prepare_name
from ens_registrar.utils.logger import get_logger
from ens_registrar.utils.validation import validate_amount, validate_hash

logger = get_logger("registrar")

T = TypeVar("T")

Options = Union[TxParams, Mapping[str, Any], None]


# =============================================================================
# Synchronous adapter
# =============================================================================


async def _wait(awaitable: Awaitable[T]) -> T:
    return await awaitable


def run_sync(awaitable: Awaitable[T]) -> T:
    """
    Block the calling thread until `awaitable` completes.

    Only valid outside a running event loop; inside one, await directly.

    Raises:
        RuntimeError: If called from a thread with a running event loop
        Any exception raised by the awaitable
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(_wait(awaitable))

    close = getattr(awaitable, "close", None)
    if close is not None:
        close()
    raise RuntimeError("run_sync() called from a running event loop; await the coroutine instead")


def _address(value: str, what: str) -> str:
    try:
        return normalize_address(value)
    except (TypeError, ValueError) as e:
        raise InvalidAddress(f"Invalid {what} address: {value!r}") from e


# =============================================================================
# Registrar
# =============================================================================


class Registrar:
    """
    Client for a deployed auction registry.

    Holds no auction state: every read goes to the registry and every
    write is forwarded to it.
    """

    def __init__(
        self,
        transport: Transport,
        registry_address: str,
        min_name_length: int = DEFAULT_MIN_NAME_LENGTH,
        default_gas: Optional[int] = None,
    ):
        """
        Initialize the client.

        Args:
            transport: Network collaborator used for all calls
            registry_address: Address of the registry contract
            min_name_length: Registry minimum label length
            default_gas: Gas applied to transactions that do not set one
        """
        self.contract = RegistryContract(transport, registry_address, default_gas=default_gas)
        self.min_name_length = min_name_length

        logger.info(f"Registrar client for {self.contract.address} "
                    f"(min_name_length={min_name_length})")

    @classmethod
    def from_config(cls, transport: Transport, config: RegistrarConfig) -> "Registrar":
        return cls(
            transport,
            config.registry_address,
            min_name_length=config.min_name_length,
            default_gas=config.default_gas,
        )

    @property
    def address(self) -> str:
        return self.contract.address

    def _prepare(self, name: str, check_length: bool = True) -> str:
        return prepare_name(name, self.min_name_length, check_length=check_length)

    def _hash(self, normalized: str) -> bytes:
        return name_hash(normalized)

    # =========================================================================
    # Reads
    # =========================================================================

    async def get_entry(self, name: str) -> Entry:
        """
        Fetch and decode a name's auction record.

        Case and width variants of a name resolve to the same record.
        Names below the minimum length are still readable, so a name
        moved to FORBIDDEN by invalidate_name can be inspected.
        """
        normalized = self._prepare(name, check_length=False)
        raw = await self.contract.call("entries", self._hash(normalized))
        return decode_entry(normalized, raw)

    def get_entry_sync(self, name: str) -> Entry:
        """Blocking form of get_entry."""
        return run_sync(self.get_entry(name))

    async def get_sealed_bid(self, sha_bid: str) -> str:
        """
        Deed address holding a sealed bid's deposit.

        Returns the zero address when no such commitment exists.
        """
        valid, err = validate_hash(sha_bid, "sha_bid")
        if not valid:
            raise InvalidBidHash(err)
        (deed,) = await self.contract.call("sealedBids", sha_bid)
        return deed

    def get_sealed_bid_sync(self, sha_bid: str) -> str:
        """Blocking form of get_sealed_bid."""
        return run_sync(self.get_sealed_bid(sha_bid))

    # =========================================================================
    # Auction lifecycle
    # =========================================================================

    async def open_auction(self, name: str, opts: Options = None) -> str:
        """
        Start an auction for a name.

        The registry rejects names that are not OPEN; that rejection
        surfaces as whatever error the transport raises.
        """
        normalized = self._prepare(name)
        logger.info(f"Opening auction for {normalized!r}")
        return await self.contract.transact("startAuction", [self._hash(normalized)], opts)

    async def submit_bid(self, bid: Bid, opts: Options = None) -> str:
        """
        Submit a sealed bid built by make_bid.

        The commitment is sent as-is and the bid's deposit is the
        transaction value.

        Raises:
            InvalidDeposit: If opts carries a value different from bid.deposit
        """
        params = TxParams.coerce(opts)
        if params.value is not None and params.value != bid.deposit:
            raise InvalidDeposit(f"Transaction value {params.value} does not match "
                                 f"bid deposit {bid.deposit}")
        valid, err = validate_amount(bid.deposit, "deposit")
        if not valid:
            raise InvalidDeposit(err)

        params = params.model_copy(update={"value": bid.deposit})
        logger.info(f"Submitting bid {bid.sha_bid[:18]}... with deposit {bid.deposit}")
        return await self.contract.transact("newBid", [bid.sha_bid], params)

    async def unseal_bid(
        self,
        name: str,
        owner: str,
        value: int,
        secret: str,
        opts: Options = None,
    ) -> str:
        """
        Reveal a previously submitted bid.

        Sends the plaintext (hash, owner, value, salt); the registry
        recomputes the commitment and matches it against its sealed bids.
        """
        normalized = self._prepare(name)
        owner = _address(owner, "owner")
        valid, err = validate_amount(value, "value")
        if not valid:
            raise InvalidAmount(err)
        check_secret(secret)

        salt = secret_hash(secret)
        logger.info(f"Unsealing bid on {normalized!r} for {owner}")
        return await self.contract.transact(
            "unsealBid", [self._hash(normalized), owner, value, salt], opts
        )

    async def finalize_auction(self, name: str, opts: Options = None) -> str:
        """Close a finished auction and settle the winning deed."""
        normalized = self._prepare(name)
        return await self.contract.transact("finalizeAuction", [self._hash(normalized)], opts)

    async def cancel_bid(self, bidder: str, sha_bid: str, opts: Options = None) -> str:
        """Cancel a stale sealed bid that was never revealed."""
        bidder = _address(bidder, "bidder")
        valid, err = validate_hash(sha_bid, "sha_bid")
        if not valid:
            raise InvalidBidHash(err)
        return await self.contract.transact("cancelBid", [bidder, sha_bid], opts)

    # =========================================================================
    # Ownership
    # =========================================================================

    async def invalidate_name(self, name: str, opts: Options = None) -> str:
        """
        Ask the registry to forbid a name shorter than the minimum length.

        Character rules still apply; the length rule does not, since the
        targets of invalidation are exactly the names below it.
        """
        normalized = self._prepare(name, check_length=False)
        logger.info(f"Invalidating {normalized!r}")
        return await self.contract.transact("invalidateName", [normalized], opts)

    async def release_deed(self, name: str, opts: Options = None) -> str:
        """Give up an owned name and return it to OPEN."""
        normalized = self._prepare(name)
        return await self.contract.transact("releaseDeed", [self._hash(normalized)], opts)

    async def transfer(self, name: str, new_owner: str, opts: Options = None) -> str:
        """Transfer an owned name's deed to another account."""
        normalized = self._prepare(name)
        new_owner = _address(new_owner, "new owner")
        logger.info(f"Transferring {normalized!r} to {new_owner}")
        return await self.contract.transact("transfer", [self._hash(normalized), new_owner], opts)

    def name_hash(self, name: str) -> str:
        """Hex registry key for a name, after validation and normalization."""
        return bytes_to_hex(self._hash(self._prepare(name)))


__all__ = [
    "Registrar",
    "run_sync",
]
