"""Data models for verbosity control."""

from .config import VerbosityConfig
from .verbosity import (
    DEFAULT_VERBOSITY,
    TextOptions,
    Verbosity,
    parse_verbosity,
    verbosity_to_token,
)

__all__ = [
    "DEFAULT_VERBOSITY",
    "TextOptions",
    "Verbosity",
    "VerbosityConfig",
    "parse_verbosity",
    "verbosity_to_token",
]
