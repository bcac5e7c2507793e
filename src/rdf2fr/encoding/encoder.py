"""
Field Encoder - Maps RDF terms and quads to scalar-field elements.

Every term string becomes an integer strictly below the modulus:
- canonical small integers pass through unchanged
- everything else is hashed (256-bit digest, big-endian) and reduced
Each quad becomes five elements: subject, predicate, object, graph and the
numeric value of an integer-typed object literal.
"""

import logging
from typing import Callable, Iterable, NamedTuple

from rdf2fr.encoding.field import (
    DEFAULT_MODULUS,
    DEFAULT_SMALL_INT_THRESHOLD,
    FieldElement,
    digest_to_int,
    get_digest,
    is_canonical_decimal,
    is_decimal,
    parse_modulus,
    reduce_decimal,
)
from rdf2fr.errors import ConfigError
from rdf2fr.loaders.nquads_loader import parse_quad_line
from rdf2fr.models import RawQuad

logger = logging.getLogger(__name__)

ELEMENTS_PER_QUAD = 5


class EncodedQuad(NamedTuple):
    """The five field elements of one quad, in output order."""

    subject: FieldElement
    predicate: FieldElement
    object: FieldElement
    graph: FieldElement
    numeric: FieldElement


# =============================================================================
# FIELD ENCODER
# =============================================================================


class FieldEncoder:
    """
    Deterministic term and quad encoder over a fixed modulus.

    The encoder holds no mutable state; all outputs depend only on the input
    string and the construction parameters.

    Usage:
        encoder = FieldEncoder()
        encoder.encode_term("http://example.org/alice")
        encoder.encode_quad('<http://s> <http://p> "42"^^<http://www.w3.org/2001/XMLSchema#integer> .')
    """

    def __init__(
        self,
        modulus: str | int = DEFAULT_MODULUS,
        small_int_threshold: int = DEFAULT_SMALL_INT_THRESHOLD,
        digest: str = "sha256",
    ):
        """
        Initialize the encoder.

        Args:
            modulus: Field modulus as a decimal string or int
            small_int_threshold: Canonical integers below this are not hashed
            digest: Name of the 256-bit digest used for hashing terms

        Raises:
            ConfigError: if the modulus, threshold or digest is invalid
        """
        self._modulus = parse_modulus(modulus)
        if isinstance(small_int_threshold, bool) or not isinstance(small_int_threshold, int):
            raise ConfigError(f"Small-integer threshold must be an int, got {small_int_threshold!r}")
        if small_int_threshold < 0:
            raise ConfigError(f"Small-integer threshold must be >= 0, got {small_int_threshold}")
        self._threshold = small_int_threshold
        self._digest_name = digest
        self._digest: Callable[[bytes], bytes] = get_digest(digest)

        # Fast-path values must themselves be field elements
        self._fast_path_limit = min(self._threshold, self._modulus)
        self._fast_path_digits = len(str(self._fast_path_limit))

        logger.debug(
            "FieldEncoder ready (modulus=%d bits, threshold=%d, digest=%s)",
            self._modulus.bit_length(),
            self._threshold,
            self._digest_name,
        )

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def small_int_threshold(self) -> int:
        return self._threshold

    @property
    def digest_name(self) -> str:
        return self._digest_name

    # =========================================================================
    # TERM LEVEL
    # =========================================================================

    def hash_to_field(self, text: str) -> int:
        """Hash UTF-8 text and reduce the big-endian digest modulo the modulus."""
        return digest_to_int(self._digest(text.encode("utf-8"))) % self._modulus

    def encode_term(self, term_string: str) -> FieldElement:
        """
        Encode a term string as a field element.

        Args:
            term_string: IRI, blank node label, literal display form or number

        Returns:
            Decimal string of a value in [0, modulus)
        """
        if len(term_string) <= self._fast_path_digits and is_canonical_decimal(term_string):
            if int(term_string) < self._fast_path_limit:
                return term_string
        return str(self.hash_to_field(term_string))

    def encode_numeric(self, value_string: str) -> FieldElement:
        """
        Encode a numeric literal by value.

        Non-negative integers are reduced modulo the modulus so that their
        magnitude survives (digit strings of any length are accepted); anything
        else falls back to encode_term.
        """
        if is_decimal(value_string):
            return str(reduce_decimal(value_string, self._modulus))
        return self.encode_term(value_string)

    # =========================================================================
    # QUAD LEVEL
    # =========================================================================

    def encode_raw_quad(self, quad: RawQuad) -> EncodedQuad:
        """Encode an already tokenized quad."""
        return EncodedQuad(
            subject=self.encode_term(quad.subject.display()),
            predicate=self.encode_term(quad.predicate.display()),
            object=self.encode_term(quad.object.display()),
            graph=self.encode_term(quad.graph_name),
            numeric=self.encode_numeric(quad.object.numeric_string()),
        )

    def encode_quad(self, raw_line: str, line_number: int = 0) -> EncodedQuad:
        """
        Parse and encode one line of quad syntax.

        Raises:
            MalformedQuadError: if the line has fewer than 3 terms or cannot be read
        """
        return self.encode_raw_quad(parse_quad_line(raw_line, line_number))

    def encode_all(self, quads: Iterable[RawQuad]) -> list[FieldElement]:
        """Encode quads into the flat output sequence, five elements per quad."""
        sequence: list[FieldElement] = []
        for quad in quads:
            sequence.extend(self.encode_raw_quad(quad))
        return sequence

    def __repr__(self) -> str:
        return (
            f"FieldEncoder(modulus={self._modulus}, "
            f"small_int_threshold={self._threshold}, digest={self._digest_name!r})"
        )
