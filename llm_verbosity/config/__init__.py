"""Configuration module for verbosity control."""

from .model_families import MODEL_FAMILIES, find_model_family, get_family_config

# Import all constants
from .constants import *

__all__ = [
    "MODEL_FAMILIES",
    "find_model_family",
    "get_family_config",
]
