"""
Encoding Module - RDF terms and quads to scalar-field elements.

This module provides functionality for turning tokenized quads into
field elements that fit below a fixed curve modulus.

Components:
- field.py: Modulus constants, digests, decimal parsing
- encoder.py: Term and quad encoding
- validator.py: Range-invariant verification
- serializer.py: JSON persistence of output sequences
- decoder.py: Reading sequences back as encoded quads
"""

from .decoder import group_encoded_quads, load_encoded_quads, to_field_ints
from .encoder import ELEMENTS_PER_QUAD, EncodedQuad, FieldEncoder
from .field import BN254_FR_MODULUS, DEFAULT_MODULUS, DEFAULT_SMALL_INT_THRESHOLD, DIGESTS
from .serializer import ResultWriter, load_sequence, write_sequence
from .validator import RangeCheckResult, verify_range

__all__ = [
    # Encoder
    "FieldEncoder",
    "EncodedQuad",
    "ELEMENTS_PER_QUAD",
    # Field
    "BN254_FR_MODULUS",
    "DEFAULT_MODULUS",
    "DEFAULT_SMALL_INT_THRESHOLD",
    "DIGESTS",
    # Validator
    "RangeCheckResult",
    "verify_range",
    # Serializer
    "ResultWriter",
    "load_sequence",
    "write_sequence",
    # Decoder
    "group_encoded_quads",
    "load_encoded_quads",
    "to_field_ints",
]
