"""
Error types for rdf2fr.

User-input errors (bad config, unreadable files, malformed quads) are kept
apart from internal encoder defects.
"""

from pathlib import Path


class Rdf2FrError(Exception):
    """Base class for all rdf2fr errors."""


# =============================================================================
# USER INPUT ERRORS
# =============================================================================


class UserInputError(Rdf2FrError):
    """Raised when the run cannot proceed because of its inputs."""


class ConfigError(UserInputError):
    """Raised when the configuration (modulus, digest, YAML file) is invalid."""


class QuadIOError(UserInputError):
    """Raised when an input cannot be read or an output cannot be written."""

    def __init__(self, path: str | Path, message: str):
        self.path = str(path)
        super().__init__(f"{self.path}: {message}")


class MalformedQuadError(UserInputError):
    """Raised when a non-blank, non-comment line is not a readable quad."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class MalformedOutputError(UserInputError):
    """Raised when a persisted field-element sequence cannot be decoded."""


# =============================================================================
# INTERNAL ERRORS
# =============================================================================


class InternalEncoderError(Rdf2FrError):
    """Raised when the encoder breaks its own output contract."""


class RangeInvariantViolation(InternalEncoderError):
    """A produced field element is not a canonical value below the modulus."""

    def __init__(self, index: int, value: str, modulus: int):
        self.index = index
        self.value = value
        self.modulus = modulus
        super().__init__(
            f"element {index} ({value!r}) is not a canonical field element below modulus {modulus}"
        )
