"""
Utilities Module - Helper functions for the rdf2fr command line.
"""

from .logging import add_file_handler, remove_file_handler, setup_colored_logging

__all__ = [
    "setup_colored_logging",
    "add_file_handler",
    "remove_file_handler",
]
