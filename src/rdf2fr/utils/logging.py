import logging
import re
import sys
from pathlib import Path

_ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI escape codes (e.g. [31m, [1;33m) from text."""
    return _ANSI_ESCAPE.sub("", text)


class ColoredFormatter(logging.Formatter):
    """Logging formatter that adds colors and icons based on level and module."""

    # ANSI Escape Codes
    RESET = "\033[0m"
    BOLD = "\033[1m"

    COLORS = {
        "DEBUG": "\033[37m",  # White
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }

    # Icons and colors per component
    MODULE_THEMES = {
        "rdf2fr.loaders": ("📂", "\033[1;36m"),  # Bold Cyan
        "rdf2fr.encoding.encoder": ("🔢", "\033[1;35m"),  # Bold Magenta
        "rdf2fr.encoding.validator": ("✅", "\033[1;33m"),  # Bold Yellow
        "rdf2fr.encoding.serializer": ("💾", "\033[1;32m"),  # Bold Green
        "rdf2fr.encoding.decoder": ("🔎", "\033[1;36m"),  # Bold Cyan
        "rdf2fr.pipeline": ("⚙️ ", "\033[1;34m"),  # Bold Blue
        "rdf2fr.main": ("🚀", "\033[1;32m"),  # Bold Green
        "__main__": ("🚀", "\033[1;32m"),  # Bold Green
        "rdflib": ("🔗", "\033[1;90m"),  # Dark Gray
        "root": ("⚙️ ", "\033[1;90m"),  # Dark Gray
    }

    def format(self, record):
        icon, module_color = "•", self.BOLD
        for name, theme in self.MODULE_THEMES.items():
            if record.name.startswith(name):
                icon, module_color = theme
                break

        level_color = self.COLORS.get(record.levelname, self.RESET)
        level_name = f"{level_color}{record.levelname:8}{self.RESET}"

        short_name = record.name.split(".")[-1]
        module_display = f"{module_color}{icon} {short_name:14}{self.RESET}"

        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            message = f"{level_color}{message}{self.RESET}"

        timestamp = self.formatTime(record, self.datefmt)
        return f"{timestamp} | {level_name} | {module_display} | {message}"


class PlainFormatter(logging.Formatter):
    """Plain text formatter for file logging (no ANSI codes)."""

    def format(self, record):
        timestamp = self.formatTime(record, self.datefmt)
        short_name = record.name.split(".")[-1]
        message = strip_ansi_codes(record.getMessage())
        return f"{timestamp} | {record.levelname:8} | {short_name:14} | {message}"


_file_handler: logging.FileHandler | None = None


def setup_colored_logging(level=logging.INFO, log_file: str | Path | None = None):
    """
    Sets up global logging with the ColoredFormatter.

    Console output goes to stderr so that it never mixes with data written
    to stdout.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file for persistent logging
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(datefmt="%H:%M:%S"))
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing handlers
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    if log_file:
        add_file_handler(log_file, logging.DEBUG)

    # rdflib warns about every ill-typed literal it sees
    logging.getLogger("rdflib").setLevel(max(level, logging.ERROR))


def add_file_handler(log_file: str | Path, level=logging.DEBUG) -> logging.FileHandler:
    """
    Add a file handler to the root logger.

    Args:
        log_file: Path to the log file
        level: Logging level for file (default: DEBUG for maximum detail)

    Returns:
        The created FileHandler
    """
    global _file_handler

    if _file_handler:
        remove_file_handler()

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _file_handler = logging.FileHandler(str(log_path), mode="w", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(PlainFormatter(datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.addHandler(_file_handler)
    # Let DEBUG records reach the file even when the console is quieter
    root_logger.setLevel(min(root_logger.level or logging.WARNING, level))
    logging.info("File logging enabled: %s", log_path)

    return _file_handler


def remove_file_handler() -> None:
    """Remove the file handler from the root logger."""
    global _file_handler

    if _file_handler:
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
