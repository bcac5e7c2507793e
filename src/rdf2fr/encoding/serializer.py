"""
Result Serializer - Persists field-element sequences as JSON.

Writes a single JSON array of decimal strings, in full, through a temporary
file that is moved into place, so readers never see a fragment.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Sequence

from rdf2fr.errors import MalformedOutputError, QuadIOError

logger = logging.getLogger(__name__)


def write_json_atomic(path: Path | str, data: Any, indent: int | None = 2) -> None:
    """
    Write JSON to a temp file in the target directory and move it into place.

    Raises:
        QuadIOError: if the directory or file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    except OSError as e:
        raise QuadIOError(path, f"cannot write output: {e.strerror or e}") from None

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=indent, ensure_ascii=False)
            fh.write("\n")
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, path)
    except OSError as e:
        raise QuadIOError(path, f"cannot write output: {e.strerror or e}") from None
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)


# =============================================================================
# RESULT WRITER
# =============================================================================


class ResultWriter:
    """
    Serializes output sequences and run reports to JSON files.

    Usage:
        writer = ResultWriter(indent=2)
        writer.write(["1", "2", "3", "4", "0"], "data.fr.json")
    """

    def __init__(self, indent: int | None = 2):
        """
        Initialize the writer.

        Args:
            indent: JSON indentation (None for a single line)
        """
        self.indent = indent

    def write(self, sequence: Sequence[str], destination: Path | str) -> Path:
        """
        Write the ordered field elements as a JSON array of strings.

        Args:
            sequence: Decimal field-element strings
            destination: Output file path

        Returns:
            The written path
        """
        path = Path(destination)
        write_json_atomic(path, list(sequence), indent=self.indent)
        logger.info("Wrote %d field elements to %s", len(sequence), path)
        return path

    def write_report(self, report: dict[str, Any], destination: Path | str) -> Path:
        """Write a run report next to the output."""
        path = Path(destination)
        write_json_atomic(path, report, indent=2)
        logger.info("Wrote run report to %s", path)
        return path


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def load_sequence(path: Path | str) -> list[str]:
    """
    Read a persisted sequence back.

    Raises:
        QuadIOError: if the file cannot be read
        MalformedOutputError: if the content is not a JSON array of strings
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        raise QuadIOError(path, "file not found") from None
    except json.JSONDecodeError as e:
        raise MalformedOutputError(f"{path}: not valid JSON: {e}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise QuadIOError(path, f"cannot read file: {e}") from None

    if not isinstance(data, list):
        raise MalformedOutputError(f"{path}: expected a JSON array, got {type(data).__name__}")
    for index, item in enumerate(data):
        if not isinstance(item, str):
            raise MalformedOutputError(
                f"{path}: element {index} is {type(item).__name__}, expected a decimal string"
            )
    return data


def write_sequence(sequence: Sequence[str], path: Path | str, indent: int | None = 2) -> Path:
    """Quick function to write a sequence to a file."""
    return ResultWriter(indent=indent).write(sequence, path)
