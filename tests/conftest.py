"""Shared fixtures for the rdf2fr test suite."""

import logging
import os
from pathlib import Path

import pytest

from rdf2fr.encoding import FieldEncoder

XSD_INTEGER = "http://www.w3.org/2001/XMLSchema#integer"

SAMPLE_NQUADS = f"""\
# Alice and her age
<http://example.org/alice> <http://xmlns.com/foaf/0.1/name> "Alice" .

<http://example.org/alice> <http://example.org/age> "42"^^<{XSD_INTEGER}> <http://example.org/graph> .
_:b0 <http://example.org/knows> <http://example.org/alice> .
"""


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep RDF2FR_* variables and global logging state out of the tests."""
    for key in list(os.environ):
        if key.startswith("RDF2FR_"):
            monkeypatch.delenv(key, raising=False)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    logging.disable(logging.NOTSET)
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def encoder() -> FieldEncoder:
    """Encoder over the default BN254 scalar field."""
    return FieldEncoder()


@pytest.fixture
def small_encoder() -> FieldEncoder:
    """Encoder over a tiny prime field, so reductions are easy to hit."""
    return FieldEncoder(modulus="97")


@pytest.fixture
def nq_file(tmp_path) -> Path:
    """A small N-Quads file with a comment and a blank line."""
    path = tmp_path / "data.nq"
    path.write_text(SAMPLE_NQUADS, encoding="utf-8")
    return path
