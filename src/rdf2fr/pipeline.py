"""
rdf2fr Pipeline - End-to-end quad encoding.

Orchestrates the entire flow: quad loading → field encoding →
range verification → serialization.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from rdf2fr.config.settings import Settings, load_config
from rdf2fr.encoding import (
    ELEMENTS_PER_QUAD,
    FieldEncoder,
    RangeCheckResult,
    ResultWriter,
    verify_range,
)
from rdf2fr.loaders import QuadReader
from rdf2fr.models import RawQuad

logger = logging.getLogger(__name__)


# =============================================================================
# PIPELINE RESULT
# =============================================================================


@dataclass
class PipelineResult:
    """Result from a complete pipeline execution."""

    # Timing
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    duration_seconds: float = 0.0

    # Input
    input_path: str | None = None
    quads_read: int = 0

    # Encoding
    modulus: int = 0
    digest: str = ""
    elements_produced: int = 0
    max_element_bits: int = 0

    # Output
    output_files: list[str] = field(default_factory=list)

    def finalize(self) -> None:
        """Mark pipeline as complete and calculate duration."""
        self.completed_at = datetime.now()
        self.duration_seconds = (self.completed_at - self.started_at).total_seconds()

    @property
    def quads_encoded(self) -> int:
        return self.elements_produced // ELEMENTS_PER_QUAD

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "timing": {
                "started_at": self.started_at.isoformat(),
                "completed_at": self.completed_at.isoformat() if self.completed_at else None,
                "duration_seconds": round(self.duration_seconds, 3),
            },
            "input": {
                "path": self.input_path,
                "quads_read": self.quads_read,
            },
            "encoding": {
                "modulus": str(self.modulus),
                "digest": self.digest,
                "quads_encoded": self.quads_encoded,
                "elements_produced": self.elements_produced,
                "max_element_bits": self.max_element_bits,
            },
            "output": {
                "files": self.output_files,
            },
        }

    def print_summary(self) -> None:
        """Print a summary of the pipeline execution."""
        print("\n" + "=" * 60)
        print("📊 ENCODING SUMMARY")
        print("=" * 60)

        print(f"\n⏱️  Duration: {self.duration_seconds:.2f}s")
        print(f"📁 Quads: {self.quads_encoded}/{self.quads_read} encoded")
        print(f"\n🔢 Field elements: {self.elements_produced}")
        print(f"   Modulus: {self.modulus.bit_length()} bits, digest: {self.digest}")
        print(f"   Widest element: {self.max_element_bits} bits")

        print(f"\n📤 Output Files: {len(self.output_files)}")
        for f in self.output_files:
            print(f"   • {f}")

        print("=" * 60)


# =============================================================================
# PIPELINE
# =============================================================================


class EncodingPipeline:
    """
    rdf2fr Pipeline

    Orchestrates:
    1. Reading quads from an N-Quads file
    2. Encoding each quad into five field elements
    3. Re-checking every element against the modulus
    4. Writing the sequence as a JSON array

    Nothing is written unless every stage succeeds.

    Usage:
        pipeline = EncodingPipeline()
        result = pipeline.execute("data.nq", "data.fr.json")
        result.print_summary()
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the pipeline.

        Args:
            settings: Configuration settings (defaults plus environment if None)

        Raises:
            ConfigError: if the encoder configuration is invalid
        """
        self.settings = settings or load_config()

        enc = self.settings.encoder
        self.encoder = FieldEncoder(
            modulus=enc.modulus,
            small_int_threshold=enc.small_int_threshold,
            digest=enc.digest,
        )
        self.reader = QuadReader(
            encoding=self.settings.reader.encoding,
            limit=self.settings.reader.limit,
        )
        self.writer = ResultWriter(indent=self.settings.output.indent)

        logger.info("Pipeline initialized")
        logger.info("  Modulus: %d bits", self.encoder.modulus.bit_length())
        logger.info("  Digest: %s", self.encoder.digest_name)

    # =========================================================================
    # PIPELINE STAGES
    # =========================================================================

    def load_quads(
        self,
        input_path: str | Path,
        progress_callback: Callable[[], None] | None = None,
    ) -> list[RawQuad]:
        """Read and tokenize every quad of the input file."""
        return self.reader.read_all(input_path, progress_callback=progress_callback)

    def encode(self, quads: list[RawQuad]) -> list[str]:
        """Encode quads into the flat output sequence."""
        logger.info("Encoding %d quads", len(quads))
        sequence = self.encoder.encode_all(quads)
        logger.info("Produced %d field elements", len(sequence))
        return sequence

    def verify(self, sequence: list[str]) -> RangeCheckResult:
        """Re-check the range invariant over the output sequence."""
        return verify_range(sequence, self.encoder.modulus)

    def write(self, sequence: list[str], output_path: str | Path) -> str:
        """Persist the output sequence."""
        return str(self.writer.write(sequence, output_path))

    # =========================================================================
    # FULL EXECUTION
    # =========================================================================

    def execute(
        self,
        input_path: str | Path,
        output_path: str | Path,
        report_path: str | Path | None = None,
        progress_callback: Callable[[], None] | None = None,
    ) -> PipelineResult:
        """
        Run all stages.

        Args:
            input_path: N-Quads input file
            output_path: JSON output file
            report_path: Optional JSON run report (defaults to
                '<output>.report.json' when output.write_report is set)
            progress_callback: Optional function called for each quad read

        Returns:
            PipelineResult for the run

        Raises:
            QuadIOError, MalformedQuadError, RangeInvariantViolation
        """
        result = PipelineResult(
            input_path=str(input_path),
            modulus=self.encoder.modulus,
            digest=self.encoder.digest_name,
        )

        quads = self.load_quads(input_path, progress_callback=progress_callback)
        result.quads_read = len(quads)

        sequence = self.encode(quads)
        check = self.verify(sequence)
        result.elements_produced = len(sequence)
        result.max_element_bits = check.max_bits

        result.output_files.append(self.write(sequence, output_path))

        if report_path is None and self.settings.output.write_report:
            report_path = Path(f"{output_path}.report.json")

        result.finalize()

        if report_path is not None:
            self.writer.write_report(result.to_dict(), report_path)
            result.output_files.append(str(report_path))

        logger.info(
            "Encoded %d quads into %d field elements in %.2fs",
            result.quads_encoded,
            result.elements_produced,
            result.duration_seconds,
        )
        return result
