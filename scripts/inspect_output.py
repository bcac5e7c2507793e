import argparse
import sys
from pathlib import Path

from rdf2fr.encoding import load_encoded_quads
from rdf2fr.encoding.field import DEFAULT_MODULUS, parse_modulus
from rdf2fr.errors import Rdf2FrError

FIELD_NAMES = ("subject", "predicate", "object", "graph", "numeric")


def inspect_output(path: Path, modulus: int, limit: int) -> int:
    quads = load_encoded_quads(path, modulus)

    print(f"File: {path}")
    print(f"Encoded quads: {len(quads)} ({len(quads) * len(FIELD_NAMES)} field elements)")
    print(f"All elements below modulus ({modulus.bit_length()} bits)")

    for index, quad in enumerate(quads[:limit]):
        print(f"\nQuad {index}:")
        for name, element in zip(FIELD_NAMES, quad):
            print(f"  {name:9}: {element}")
            print(f"  {'':9}  0x{int(element):x}")

    if len(quads) > limit:
        print(f"\n... {len(quads) - limit} more")

    # Numeric slots carry literal values, so zero is the common case
    numeric_set = sum(1 for q in quads if q.numeric != "0")
    print(f"\nQuads with a numeric value: {numeric_set}/{len(quads)}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect an rdf2fr output file")
    parser.add_argument("path", help="JSON output written by rdf2fr")
    parser.add_argument("--modulus", default=DEFAULT_MODULUS, help="Modulus used for encoding")
    parser.add_argument("--limit", type=int, default=3, help="Quads to print (default: 3)")
    args = parser.parse_args()

    try:
        return inspect_output(Path(args.path), parse_modulus(args.modulus), args.limit)
    except Rdf2FrError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
