#!/usr/bin/env python3
"""
rdf2fr CLI - Encode an N-Quads file into BN254 scalar-field elements.

Usage:
    rdf2fr --help
    rdf2fr data.nq data.fr.json
    python -m rdf2fr data.nq data.fr.json --digest blake2s --report run.json
"""

import argparse
import logging
import sys

import pyfiglet
from dotenv import load_dotenv

from rdf2fr import __version__
from rdf2fr.config.settings import Settings, load_config
from rdf2fr.errors import (
    ConfigError,
    InternalEncoderError,
    MalformedQuadError,
    QuadIOError,
)
from rdf2fr.pipeline import EncodingPipeline, PipelineResult
from rdf2fr.utils.logging import setup_colored_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2  # argparse
EXIT_CONFIG_ERROR = 3
EXIT_MALFORMED_QUAD = 4
EXIT_INTERNAL_ERROR = 70
EXIT_INTERRUPTED = 130


def setup_logging(verbose: bool = False, debug: bool = False, log_file: str | None = None) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    setup_colored_logging(level=level, log_file=log_file)


def print_banner() -> None:
    """Print the application banner."""
    print(pyfiglet.figlet_format("rdf2fr", font="small", width=80))
    print("RDF quads -> scalar field elements".center(60, "*"))


def print_config_summary(settings: Settings, args: argparse.Namespace) -> None:
    """Print configuration summary."""
    print("\n📋 Configuration:")
    print("─" * 40)
    print(f"  Input: {args.input}")
    print(f"  Output: {args.output}")
    print(f"  Modulus: {settings.encoder.modulus[:16]}… ({len(settings.encoder.modulus)} digits)")
    print(f"  Small-integer threshold: {settings.encoder.small_int_threshold}")
    print(f"  Digest: {settings.encoder.digest}")
    if settings.reader.limit:
        print(f"  Quad limit: {settings.reader.limit}")
    print("─" * 40)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rdf2fr",
        description="Encode RDF quads (N-Quads) as BN254 scalar-field elements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a dataset with the default BN254 modulus
  rdf2fr data.nq data.fr.json

  # Use a custom modulus and digest
  rdf2fr data.nq data.fr.json --modulus 2147483647 --digest blake2s

  # Write a JSON run report next to the output
  rdf2fr data.nq data.fr.json --report data.report.json --verbose
        """,
    )

    parser.add_argument("input", help="N-Quads input file")
    parser.add_argument("output", help="JSON output file (array of decimal strings)")

    # Configuration
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="YAML configuration file",
    )

    parser.add_argument(
        "--modulus",
        "-m",
        type=str,
        default=None,
        help="Field modulus as a decimal string (default: BN254 scalar field)",
    )

    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Integers below this value are emitted without hashing (default: 1000000)",
    )

    parser.add_argument(
        "--digest",
        type=str,
        choices=["sha256", "sha3_256", "blake2s", "blake2b"],
        default=None,
        help="Digest used to hash terms (default: from config)",
    )

    parser.add_argument(
        "--limit",
        "-l",
        type=int,
        default=None,
        help="Maximum number of quads to encode (default: all)",
    )

    # Output options
    parser.add_argument(
        "--report",
        "-r",
        type=str,
        default=None,
        help="Write a JSON run report to this path",
    )

    # Logging
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write a plain-text log to this path",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (very verbose)",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> None:
    """Apply CLI arguments to settings."""
    if args.modulus is not None:
        settings.encoder.modulus = args.modulus

    if args.threshold is not None:
        if args.threshold < 0:
            raise ConfigError(f"--threshold must be >= 0, got {args.threshold}")
        settings.encoder.small_int_threshold = args.threshold

    if args.digest:
        settings.encoder.digest = args.digest

    if args.limit is not None:
        if args.limit < 1:
            raise ConfigError(f"--limit must be >= 1, got {args.limit}")
        settings.reader.limit = args.limit


def run(args: argparse.Namespace) -> PipelineResult:
    """Build the pipeline from configuration and run it."""
    settings = load_config(args.config)
    apply_cli_overrides(settings, args)

    pipeline = EncodingPipeline(settings=settings)

    if not args.quiet:
        print_config_summary(settings, args)
        print("\n🚀 Encoding...")

    return pipeline.execute(args.input, args.output, report_path=args.report)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        setup_logging(log_file=args.log_file)
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=args.verbose, debug=args.debug, log_file=args.log_file)
        print_banner()

    try:
        result = run(args)

    except ConfigError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except QuadIOError as e:
        print(f"❌ I/O error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    except MalformedQuadError as e:
        print(f"❌ Malformed quad at {args.input}:{e.line_number}: {e.reason}", file=sys.stderr)
        print(f"   {e.line}", file=sys.stderr)
        return EXIT_MALFORMED_QUAD

    except InternalEncoderError as e:
        logger.exception("Encoder invariant violated")
        print(f"❌ Internal error (please report this as a bug): {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    if not args.quiet:
        result.print_summary()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
