"""
rdf2fr - Configuration package.
"""

from .settings import EncoderConfig, OutputConfig, ReaderConfig, Settings, load_config

__all__ = ["EncoderConfig", "OutputConfig", "ReaderConfig", "Settings", "load_config"]
