"""
Output decoding - Regroups persisted sequences into encoded quads.
"""

import logging
from pathlib import Path
from typing import Sequence

from rdf2fr.encoding.encoder import ELEMENTS_PER_QUAD, EncodedQuad
from rdf2fr.encoding.serializer import load_sequence
from rdf2fr.encoding.validator import verify_range
from rdf2fr.errors import MalformedOutputError

logger = logging.getLogger(__name__)


def group_encoded_quads(sequence: Sequence[str]) -> list[EncodedQuad]:
    """
    Split a flat output sequence into consecutive 5-tuples.

    Raises:
        MalformedOutputError: if the length is not a multiple of 5
    """
    if len(sequence) % ELEMENTS_PER_QUAD != 0:
        raise MalformedOutputError(
            f"Sequence length ({len(sequence)}) is not divisible by {ELEMENTS_PER_QUAD}"
        )
    return [
        EncodedQuad(*sequence[i : i + ELEMENTS_PER_QUAD])
        for i in range(0, len(sequence), ELEMENTS_PER_QUAD)
    ]


def to_field_ints(sequence: Sequence[str], modulus: int) -> list[int]:
    """Range-check a sequence and convert it to Python ints."""
    verify_range(sequence, modulus)
    return [int(element) for element in sequence]


def load_encoded_quads(path: Path | str, modulus: int) -> list[EncodedQuad]:
    """Read, range-check and regroup a persisted output file."""
    sequence = load_sequence(path)
    verify_range(sequence, modulus)
    quads = group_encoded_quads(sequence)
    logger.info("Loaded %d encoded quads from %s", len(quads), path)
    return quads
