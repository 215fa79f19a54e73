"""
Error taxonomy for the registrar client.

Local errors (names, amounts, addresses) are raised before any hash is
computed or any request leaves the process. Decode errors mean the
registry answered with something this client does not understand.
Transport and registry errors are not represented here: they reach the
caller exactly as the transport raised them.
"""


class RegistrarError(Exception):
    """Base class for all registrar client errors."""


# =============================================================================
# Local validation errors
# =============================================================================


class InvalidName(RegistrarError, ValueError):
    """A name that cannot legally enter the auction."""

    def __init__(self, name, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"{reason}: {name!r}")


class TooShort(InvalidName):
    """Canonical name is shorter than the registry's minimum length."""

    def __init__(self, name, length: int, min_length: int):
        self.length = length
        self.min_length = min_length
        super().__init__(name, f"Name too short ({length} < {min_length})")


class SpecialCharacters(InvalidName):
    """Name contains code points outside the permitted label alphabet."""

    def __init__(self, name, detail: str = "contains special characters"):
        self.detail = detail
        super().__init__(name, f"Name {detail}")


class InvalidAmount(RegistrarError, ValueError):
    """An amount that is not a non-negative 256-bit integer."""


class InvalidDeposit(InvalidAmount):
    """A syntactically malformed bid deposit."""


class InvalidAddress(RegistrarError, ValueError):
    """A malformed account address."""


class InvalidSecret(RegistrarError, TypeError):
    """A bid secret that is neither text nor bytes."""


class InvalidBidHash(RegistrarError, ValueError):
    """A malformed sealed-bid hash, or one that does not match its bid."""


# =============================================================================
# Decode errors
# =============================================================================


class DecodeError(RegistrarError, ValueError):
    """A registry response that cannot be mapped onto the local model."""


class UnknownStatus(DecodeError):
    """The registry reported an auction status code this client does not know."""

    def __init__(self, raw_status):
        self.raw_status = raw_status
        super().__init__(f"Unknown auction status: {raw_status!r}")


__all__ = [
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
]
