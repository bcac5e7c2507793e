"""
Field constants and helpers.

Holds the default scalar-field modulus, the digest registry used for hashing
terms, and the parsing rules for decimal field-element strings.
"""

import hashlib
import re
from typing import Callable

from rdf2fr.errors import ConfigError

# =============================================================================
# MODULUS
# =============================================================================

# BN254 scalar field order (Fr)
BN254_FR_MODULUS = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)
DEFAULT_MODULUS = str(BN254_FR_MODULUS)

# Integers below this value are emitted as-is instead of being hashed
DEFAULT_SMALL_INT_THRESHOLD = 1_000_000

FieldElement = str

_DECIMAL_RE = re.compile(r"[0-9]+")
_CANONICAL_DECIMAL_RE = re.compile(r"0|[1-9][0-9]*")

# Below the interpreter's int/str conversion limit
MAX_DECIMAL_DIGITS = 4000
_CHUNK_DIGITS = 1000


def is_decimal(text: str) -> bool:
    """True if text is a non-negative ASCII decimal integer (leading zeros allowed)."""
    return _DECIMAL_RE.fullmatch(text) is not None


def is_canonical_decimal(text: str) -> bool:
    """True if text is a decimal integer with no sign and no leading zero."""
    return _CANONICAL_DECIMAL_RE.fullmatch(text) is not None


def reduce_decimal(text: str, modulus: int) -> int:
    """
    Reduce a decimal digit string modulo modulus.

    Digits are folded in fixed-size chunks, so strings of any length work.
    """
    value = 0
    for start in range(0, len(text), _CHUNK_DIGITS):
        chunk = text[start : start + _CHUNK_DIGITS]
        value = (value * 10 ** len(chunk) + int(chunk)) % modulus
    return value


def parse_modulus(value: str | int) -> int:
    """
    Parse a configured modulus.

    Args:
        value: Decimal string or integer

    Returns:
        The modulus as an int

    Raises:
        ConfigError: if the value is not a non-negative decimal integer,
            is too small to define a field, or is too long to convert
    """
    if isinstance(value, bool):
        raise ConfigError(f"Modulus must be a decimal integer, got {value!r}")
    if isinstance(value, int):
        if value.bit_length() > 3 * MAX_DECIMAL_DIGITS:
            raise ConfigError(f"Modulus has more than {MAX_DECIMAL_DIGITS} digits")
        modulus = value
    else:
        text = str(value).strip()
        if not is_decimal(text):
            raise ConfigError(f"Modulus is not a non-negative decimal integer: {value!r}")
        if len(text) > MAX_DECIMAL_DIGITS:
            raise ConfigError(f"Modulus has more than {MAX_DECIMAL_DIGITS} digits")
        modulus = int(text)

    if modulus < 2:
        raise ConfigError(f"Modulus must be at least 2, got {modulus}")
    return modulus


# =============================================================================
# DIGESTS
# =============================================================================

DIGESTS: dict[str, Callable[[bytes], bytes]] = {
    "sha256": lambda data: hashlib.sha256(data).digest(),
    "sha3_256": lambda data: hashlib.sha3_256(data).digest(),
    "blake2s": lambda data: hashlib.blake2s(data).digest(),
    "blake2b": lambda data: hashlib.blake2b(data, digest_size=32).digest(),
}


def get_digest(name: str) -> Callable[[bytes], bytes]:
    """Look up a 256-bit digest function by name."""
    try:
        return DIGESTS[name]
    except KeyError:
        raise ConfigError(
            f"Unsupported digest: {name}. Supported: {sorted(DIGESTS)}"
        ) from None


def digest_to_int(digest: bytes) -> int:
    """Interpret a digest as a big-endian unsigned integer."""
    return int.from_bytes(digest, "big")
