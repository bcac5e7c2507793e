"""
Range Validator - Re-checks every produced field element against the modulus.

The encoder guarantees 0 <= v < modulus by construction; this module checks
it again on the serialized strings before anything is written.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from rdf2fr.encoding.field import is_canonical_decimal
from rdf2fr.errors import RangeInvariantViolation

logger = logging.getLogger(__name__)


# =============================================================================
# RANGE CHECK RESULT
# =============================================================================


@dataclass
class RangeCheckResult:
    """Result of a range check over an output sequence."""

    modulus: int
    checked: int = 0
    max_value: int | None = None
    info: dict[str, Any] = field(default_factory=dict)

    @property
    def max_bits(self) -> int:
        return self.max_value.bit_length() if self.max_value is not None else 0

    def summary(self) -> str:
        """Get a summary of the range check."""
        return (
            f"Range check OK: {self.checked} elements < modulus "
            f"({self.modulus.bit_length()} bits), widest value {self.max_bits} bits"
        )


# =============================================================================
# RANGE VALIDATOR
# =============================================================================


def verify_range(sequence: Sequence[str], modulus: int) -> RangeCheckResult:
    """
    Verify that every element is a canonical decimal below the modulus.

    Args:
        sequence: Output sequence of decimal strings
        modulus: Field modulus

    Returns:
        RangeCheckResult describing the checked sequence

    Raises:
        RangeInvariantViolation: on the first offending element
    """
    result = RangeCheckResult(modulus=modulus)
    max_digits = len(str(modulus))

    for index, element in enumerate(sequence):
        if not isinstance(element, str) or not is_canonical_decimal(element):
            raise RangeInvariantViolation(index, str(element), modulus)

        # Canonical strings longer than the modulus are out of range
        if len(element) > max_digits or int(element) >= modulus:
            raise RangeInvariantViolation(index, element, modulus)

        value = int(element)
        if result.max_value is None or value > result.max_value:
            result.max_value = value
        result.checked += 1

    logger.info(result.summary())
    return result
