"""
Configuration management for rdf2fr.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rdf2fr.encoding.field import DEFAULT_MODULUS, DEFAULT_SMALL_INT_THRESHOLD
from rdf2fr.errors import ConfigError


class EncoderConfig(BaseModel):
    """Field encoder configuration.

    The modulus is kept as a decimal string; it is parsed (and rejected if
    unparsable) when the encoder is built.
    """

    modulus: str = DEFAULT_MODULUS  # BN254 scalar field
    small_int_threshold: int = Field(default=DEFAULT_SMALL_INT_THRESHOLD, ge=0)
    digest: Literal["sha256", "sha3_256", "blake2s", "blake2b"] = "sha256"

    @field_validator("modulus", mode="before")
    @classmethod
    def _modulus_as_text(cls, value):
        # YAML and env files may carry the modulus as a bare number
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ReaderConfig(BaseModel):
    """Quad reader configuration."""

    encoding: str = "utf-8"
    limit: int | None = Field(default=None, ge=1)


class OutputConfig(BaseModel):
    """Output configuration."""

    indent: int | None = Field(default=2, ge=0)
    write_report: bool = False


class Settings(BaseSettings):
    """Main configuration class."""

    model_config = SettingsConfigDict(
        env_prefix="RDF2FR_",
        env_nested_delimiter="__",
    )

    encoder: EncoderConfig = Field(default_factory=EncoderConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(config_path: str | Path | None = None) -> Settings:
    """
    Load configuration from an optional YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file (None for defaults)

    Returns:
        Settings object with loaded configuration

    Raises:
        ConfigError: if the file is missing or unreadable, or a value is invalid
    """
    config_dict = {}

    if config_path is not None:
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Config file not found: {config_file}")
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config file {config_file}: {e}") from None
        if not isinstance(config_dict, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping")

    # Create settings, which will also load from environment variables
    try:
        return Settings(**config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from None
