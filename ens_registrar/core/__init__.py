"""
Registrar core.

Name validation and normalization, content hashing, entry decoding,
bid construction and the registrar client.
"""

from ens_registrar.core.exceptions import (
    RegistrarError,
    InvalidName,
    TooShort,
    SpecialCharacters,
    InvalidAmount,
    InvalidDeposit,
    InvalidAddress,
    InvalidSecret,
    InvalidBidHash,
    DecodeError,
    UnknownStatus,
)

from ens_registrar.core.config import (
    RegistrarConfig,
    load_config,
    DEFAULT_MIN_NAME_LENGTH,
)

from ens_registrar.core.names import (
    normalize_name,
    validate_name,
    prepare_name,
    check_name,
)

from ens_registrar.core.hashing import (
    name_hash,
    secret_hash,
    bid_hash,
)

from ens_registrar.core.entry import (
    AuctionStatus,
    Entry,
    to_status,
    decode_entry,
)

from ens_registrar.core.bid import (
    Bid,
    make_bid,
)

from ens_registrar.core.registrar import (
    Registrar,
    run_sync,
)

__all__ = [
    # Errors
    "RegistrarError",
    "InvalidName",
    "TooShort",
    "SpecialCharacters",
    "InvalidAmount",
    "InvalidDeposit",
    "InvalidAddress",
    "InvalidSecret",
    "InvalidBidHash",
    "DecodeError",
    "UnknownStatus",
    # Config
    "RegistrarConfig",
    "load_config",
    "DEFAULT_MIN_NAME_LENGTH",
    # Names
    "normalize_name",
    "validate_name",
    "prepare_name",
    "check_name",
    # Hashing
    "name_hash",
    "secret_hash",
    "bid_hash",
    # Entries
    "AuctionStatus",
    "Entry",
    "to_status",
    "decode_entry",
    # Bids
    "Bid",
    "make_bid",
    # Client
    "Registrar",
    "run_sync",
]
