"""
rdf2fr - Encode RDF quads as scalar-field elements for zero-knowledge circuits.
"""

__version__ = "0.1.0"

from .encoding import EncodedQuad, FieldEncoder, ResultWriter, verify_range
from .errors import (
    ConfigError,
    InternalEncoderError,
    MalformedOutputError,
    MalformedQuadError,
    QuadIOError,
    RangeInvariantViolation,
    Rdf2FrError,
    UserInputError,
)
from .loaders import QuadReader

__all__ = [
    "__version__",
    "FieldEncoder",
    "EncodedQuad",
    "QuadReader",
    "ResultWriter",
    "verify_range",
    "Rdf2FrError",
    "UserInputError",
    "ConfigError",
    "QuadIOError",
    "MalformedQuadError",
    "MalformedOutputError",
    "InternalEncoderError",
    "RangeInvariantViolation",
]
