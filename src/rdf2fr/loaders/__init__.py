"""Loaders package for N-Quads input."""

from .nquads_loader import (
    QuadReader,
    iter_quad_lines,
    parse_quad_line,
    read_all,
    unescape,
)

__all__ = [
    "QuadReader",
    "iter_quad_lines",
    "parse_quad_line",
    "read_all",
    "unescape",
]
