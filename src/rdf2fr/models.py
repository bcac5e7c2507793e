"""
Data models - Classified RDF terms and tokenized quads.

Wraps rdflib nodes into a small pydantic model that carries the term kind and
knows the string forms the encoder hashes.
"""

from enum import Enum

from pydantic import BaseModel, Field
from rdflib import BNode, Literal, URIRef
from rdflib.namespace import XSD
from rdflib.term import Node

# =============================================================================
# DATATYPES
# =============================================================================

XSD_INTEGER_TYPES = frozenset(
    str(dt)
    for dt in (
        XSD.integer,
        XSD.int,
        XSD.long,
        XSD.short,
        XSD.byte,
        XSD.nonNegativeInteger,
        XSD.positiveInteger,
        XSD.nonPositiveInteger,
        XSD.negativeInteger,
        XSD.unsignedLong,
        XSD.unsignedInt,
        XSD.unsignedShort,
        XSD.unsignedByte,
    )
)


def is_integer_datatype(datatype: str | None) -> bool:
    """Check whether a datatype IRI denotes an integer type."""
    if not datatype:
        return False
    return datatype in XSD_INTEGER_TYPES or "integer" in datatype.lower()


XSD_BOOLEAN = str(XSD.boolean)

# Lexical forms of xsd:boolean and the values they project to
BOOLEAN_VALUES = {"true": "1", "1": "1", "false": "0", "0": "0"}


# =============================================================================
# TERM MODELS
# =============================================================================


class TermKind(str, Enum):
    """Classification tag of a term."""

    IRI = "iri"
    BLANK_NODE = "blank_node"
    PLAIN_LITERAL = "plain_literal"
    TYPED_LITERAL = "typed_literal"


class Term(BaseModel):
    """A single term of a quad."""

    kind: TermKind
    value: str = Field(description="IRI without brackets, '_:label', or literal body")
    datatype: str | None = Field(default=None, description="Datatype IRI of a typed literal")
    language: str | None = Field(default=None, description="Language tag of a plain literal")

    @classmethod
    def from_rdflib(cls, node: Node) -> "Term":
        """Build a Term from an rdflib URIRef, BNode or Literal."""
        if isinstance(node, Literal):
            if node.datatype is not None:
                return cls(
                    kind=TermKind.TYPED_LITERAL,
                    value=str(node),
                    datatype=str(node.datatype),
                )
            return cls(kind=TermKind.PLAIN_LITERAL, value=str(node), language=node.language)
        if isinstance(node, BNode):
            return cls(kind=TermKind.BLANK_NODE, value=f"_:{node}")
        if isinstance(node, URIRef):
            return cls(kind=TermKind.IRI, value=str(node))
        raise TypeError(f"Unsupported term type: {type(node).__name__}")

    @property
    def is_literal(self) -> bool:
        return self.kind in (TermKind.PLAIN_LITERAL, TermKind.TYPED_LITERAL)

    def display(self) -> str:
        """
        String form fed to the term hash.

        Typed literals become 'body^^datatype' and language-tagged literals
        'body@lang'; everything else is its value.
        """
        if self.kind == TermKind.TYPED_LITERAL:
            return f"{self.value}^^{self.datatype}"
        if self.kind == TermKind.PLAIN_LITERAL and self.language:
            return f"{self.value}@{self.language}"
        return self.value

    def numeric_string(self) -> str:
        """
        Value projection of the term for the numeric slot.

        Integer-typed literals give their raw body, xsd:boolean literals give
        '1' or '0', and everything else gives '0'.
        """
        if self.kind != TermKind.TYPED_LITERAL:
            return "0"
        if is_integer_datatype(self.datatype):
            return self.value
        if self.datatype == XSD_BOOLEAN:
            return BOOLEAN_VALUES.get(self.value.lower(), "0")
        return "0"


class RawQuad(BaseModel):
    """One tokenized input line."""

    line_number: int = Field(description="1-based line number in the source")
    line: str = Field(description="Raw line text")
    subject: Term
    predicate: Term
    object: Term
    graph: Term | None = Field(default=None, description="None for the default graph")

    @classmethod
    def from_rdflib(
        cls,
        subject: Node,
        predicate: Node,
        obj: Node,
        graph: Node | None = None,
        line_number: int = 0,
        line: str = "",
    ) -> "RawQuad":
        """Build a RawQuad from rdflib nodes (graph None means default graph)."""
        return cls(
            line_number=line_number,
            line=line,
            subject=Term.from_rdflib(subject),
            predicate=Term.from_rdflib(predicate),
            object=Term.from_rdflib(obj),
            graph=Term.from_rdflib(graph) if graph is not None else None,
        )

    @property
    def graph_name(self) -> str:
        return self.graph.display() if self.graph is not None else ""
