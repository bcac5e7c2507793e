"""
N-Quads Loader - Reads quad lines and splits them into terms.

This module provides:
- A regex-driven term scanner for single N-Quads lines (IRIs, blank nodes,
  quoted literals with escapes, language tags and datatypes)
- The QuadReader, which turns a text file into an ordered list of RawQuads
- Skipping of blank lines and '#' comment lines
"""

import logging
import re
from pathlib import Path
from typing import Callable, Iterator

from rdflib import BNode, Literal, URIRef
from rdflib.term import Node

from rdf2fr.errors import MalformedQuadError, QuadIOError
from rdf2fr.models import RawQuad

logger = logging.getLogger(__name__)

# =============================================================================
# TOKEN PATTERNS
# =============================================================================

_WS = re.compile(r"\s*")
_IRI = re.compile(r"<([^>]*)>")
_BNODE = re.compile(r"_:([^\s.]+(?:\.[^\s.]+)*)")
_LITERAL = re.compile(r'"((?:[^"\\]|\\.)*)"')
_LANG = re.compile(r"@([A-Za-z]+(?:-[A-Za-z0-9]+)*)")
_DATATYPE = re.compile(r"\s*\^\^(?:<([^>]*)>|([^\s<>\"]+))")
_BARE = re.compile(r"[^\s\"<]+")
_TAIL = re.compile(r"\s*(?:\.\s*)?(?:#.*)?$")
_ESCAPE = re.compile(r"\\(u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8}|.)")

_SIMPLE_ESCAPES = {
    "t": "\t",
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


def _unescape_match(match: re.Match) -> str:
    code = match.group(1)
    if code[0] in "uU" and len(code) > 1:
        codepoint = int(code[1:], 16)
        if 0xD800 <= codepoint <= 0xDFFF or codepoint > 0x10FFFF:
            raise ValueError(f"escape \\{code} is not a Unicode scalar value")
        return chr(codepoint)
    if code in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[code]
    raise ValueError(f"invalid escape sequence \\{code}")


def unescape(text: str) -> str:
    """Resolve N-Triples string escapes (\\n, \\", \\uXXXX, ...)."""
    if "\\" not in text:
        return text
    return _ESCAPE.sub(_unescape_match, text)


# =============================================================================
# LINE SCANNER
# =============================================================================


class _LineScanner:
    """Reads terms from one line, left to right."""

    def __init__(self, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        self.pos = 0

    def fail(self, reason: str) -> MalformedQuadError:
        return MalformedQuadError(self.line_number, self.line, reason)

    def skip_ws(self) -> None:
        self.pos = _WS.match(self.line, self.pos).end()

    def at_tail(self) -> bool:
        """True if only an optional '.' terminator and comment remain."""
        return _TAIL.match(self.line, self.pos) is not None

    def term(self) -> Node:
        self.skip_ws()
        if self.pos >= len(self.line):
            raise self.fail("unexpected end of line")

        char = self.line[self.pos]
        if char == "<":
            return URIRef(self._consume(_IRI, "unterminated IRI"))
        if char == '"':
            return self._literal()
        if self.line.startswith("_:", self.pos):
            return BNode(self._consume(_BNODE, "invalid blank node label"))
        return URIRef(self._consume(_BARE, "unexpected character", group=0))

    def _consume(self, pattern: re.Pattern, reason: str, group: int = 1) -> str:
        match = pattern.match(self.line, self.pos)
        if match is None:
            raise self.fail(reason)
        self.pos = match.end()
        try:
            return unescape(match.group(group))
        except ValueError as e:
            raise self.fail(str(e)) from None

    def _literal(self) -> Literal:
        body = self._consume(_LITERAL, "unterminated literal")

        lang = _LANG.match(self.line, self.pos)
        if lang:
            self.pos = lang.end()
            return Literal(body, lang=lang.group(1))

        datatype = _DATATYPE.match(self.line, self.pos)
        if datatype:
            self.pos = datatype.end()
            iri = datatype.group(1) if datatype.group(1) is not None else datatype.group(2)
            return Literal(body, datatype=URIRef(unescape(iri)), normalize=False)

        return Literal(body)


def parse_quad_line(line: str, line_number: int = 0) -> RawQuad:
    """
    Split one quad line into subject, predicate, object and optional graph.

    Args:
        line: Raw line text (without trailing newline)
        line_number: 1-based line number used in error reports

    Returns:
        RawQuad with rdflib-derived terms

    Raises:
        MalformedQuadError: if the line has fewer than 3 tokens or a term
            cannot be read
    """
    text = line.rstrip("\r\n")
    if len(text.split()) < 3:
        raise MalformedQuadError(line_number, text, "expected at least 3 terms")

    scanner = _LineScanner(text, line_number)
    subject = scanner.term()
    predicate = scanner.term()
    obj = scanner.term()

    graph = None
    if not scanner.at_tail():
        graph = scanner.term()
        if not scanner.at_tail():
            raise scanner.fail("trailing garbage after graph term")

    return RawQuad.from_rdflib(
        subject, predicate, obj, graph, line_number=line_number, line=text
    )


def iter_quad_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every line that carries a quad."""
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield line_number, line


# =============================================================================
# QUAD READER
# =============================================================================


class QuadReader:
    """
    Reads an N-Quads file into an ordered list of RawQuads.

    Usage:
        reader = QuadReader()
        quads = reader.read_all("data.nq")
    """

    def __init__(self, encoding: str = "utf-8", limit: int | None = None):
        """
        Initialize the reader.

        Args:
            encoding: Text encoding of the input files
            limit: Optional maximum number of quads to read
        """
        self.encoding = encoding
        self.limit = limit

    def read_text(self, source: str | Path) -> str:
        """Read the whole source, mapping OS and decoding failures to QuadIOError."""
        path = Path(source)
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            raise QuadIOError(path, "input file not found") from None
        except UnicodeDecodeError as e:
            raise QuadIOError(path, f"input is not valid {self.encoding}: {e}") from None
        except OSError as e:
            raise QuadIOError(path, f"cannot read input: {e.strerror or e}") from None

    def parse_text(
        self,
        text: str,
        progress_callback: Callable[[], None] | None = None,
    ) -> list[RawQuad]:
        """Tokenize every quad line of an in-memory text."""
        quads: list[RawQuad] = []
        for line_number, line in iter_quad_lines(text):
            if self.limit is not None and len(quads) >= self.limit:
                logger.info("Reached quad limit (%d), stopping", self.limit)
                break

            quads.append(parse_quad_line(line, line_number))

            if progress_callback:
                progress_callback()

        return quads

    def read_all(
        self,
        source: str | Path,
        progress_callback: Callable[[], None] | None = None,
    ) -> list[RawQuad]:
        """
        Read and tokenize every quad in a file.

        Args:
            source: Path to an N-Quads file
            progress_callback: Optional function called for each quad read

        Returns:
            RawQuads in input order

        Raises:
            QuadIOError: if the file cannot be read
            MalformedQuadError: on the first unreadable quad line
        """
        logger.info("Reading quads from %s", source)
        quads = self.parse_text(self.read_text(source), progress_callback=progress_callback)
        logger.info("Read %d quads from %s", len(quads), source)
        return quads


def read_all(source: str | Path, encoding: str = "utf-8") -> list[RawQuad]:
    """Quick function to read every quad of a file."""
    return QuadReader(encoding=encoding).read_all(source)
