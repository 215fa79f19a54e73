"""
Name validation and normalization.

A name is only meaningful to the registry once it is in canonical form:
the registry keys auctions by the hash of the exact bytes it receives, so
"FOOBarbaz" and "foobarbaz" would otherwise be two different auctions.

Canonical form is the UTS #46 mapping (case folding, width folding and
NFC composition, with STD3 rules) restricted to the label alphabet
[a-z0-9-]. Validation runs on that form:

    raw name -> reject marks/controls -> UTS #46 remap -> alphabet check -> length check
"""

import string
import unicodedata
from typing import Tuple

import idna

from ens_registrar.core.config import DEFAULT_MIN_NAME_LENGTH
from ens_registrar.core.exceptions import SpecialCharacters, TooShort
from ens_registrar.utils.logger import get_logger

logger = get_logger("names")


# =============================================================================
# Constants
# =============================================================================

LABEL_ALPHABET = frozenset(string.ascii_lowercase + string.digits + "-")

# Unicode general categories never accepted in a raw name
_REJECTED_CATEGORIES = ("Cc", "Cf", "Cs", "Co", "Cn")


# =============================================================================
# Normalization
# =============================================================================


def _remap(name: str) -> str:
    try:
        return idna.uts46_remap(name, std3_rules=True, transitional=False)
    except idna.IDNAError as e:
        raise SpecialCharacters(name, f"contains a disallowed code point ({e})") from e


def normalize_name(name: str) -> str:
    """
    Map a name to its canonical form.

    normalize_name("FOOBarbaz") == normalize_name("foobarbaz") == "foobarbaz".
    Idempotent on its own output.

    Raises:
        SpecialCharacters: If the name is not a string or has no UTS #46 mapping
    """
    if not isinstance(name, str):
        raise SpecialCharacters(name, f"must be str, got {type(name).__name__}")
    return _remap(name)


# =============================================================================
# Validation
# =============================================================================


def validate_name(name: str, min_length: int = DEFAULT_MIN_NAME_LENGTH, check_length: bool = True) -> None:
    """
    Check that a name can legally enter the auction.

    Args:
        name: Raw user-supplied name
        min_length: Registry minimum label length
        check_length: Skip the length rule when False (used for invalidation,
            which targets names below the minimum)

    Raises:
        SpecialCharacters: Controls, combining marks, or characters outside [a-z0-9-]
        TooShort: Canonical length below min_length
    """
    if not isinstance(name, str):
        raise SpecialCharacters(name, f"must be str, got {type(name).__name__}")

    for ch in name:
        category = unicodedata.category(ch)
        if category in _REJECTED_CATEGORIES:
            raise SpecialCharacters(name, f"contains control character U+{ord(ch):04X}")
        if category.startswith("M"):
            raise SpecialCharacters(name, f"contains combining mark U+{ord(ch):04X}")

    canonical = _remap(name)
    for ch in canonical:
        if ch not in LABEL_ALPHABET:
            raise SpecialCharacters(name, f"contains special character {ch!r}")

    if check_length and len(canonical) < min_length:
        raise TooShort(name, len(canonical), min_length)


def prepare_name(name: str, min_length: int = DEFAULT_MIN_NAME_LENGTH, check_length: bool = True) -> str:
    """
    Validate then normalize a name.

    This is the only way the rest of the package turns user input into a
    name that may be hashed.
    """
    validate_name(name, min_length, check_length=check_length)
    normalized = normalize_name(name)
    if normalized != name:
        logger.debug(f"Normalized {name!r} -> {normalized!r}")
    return normalized


def check_name(name: str, min_length: int = DEFAULT_MIN_NAME_LENGTH) -> Tuple[bool, str]:
    """
    Non-raising form of validate_name.

    Returns:
        (is_valid, error_message)
    """
    try:
        validate_name(name, min_length)
    except (SpecialCharacters, TooShort) as e:
        return False, str(e)
    return True, ""


__all__ = [
    "normalize_name",
    "validate_name",
    "prepare_name",
    "check_name",
    "LABEL_ALPHABET",
]
