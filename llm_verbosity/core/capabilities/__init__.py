"""Capability registry and verbosity policy layer."""

from .models import DEFAULT_CAPABILITIES, ModelCapabilities, get_model_capabilities
from .policy import resolve_verbosity, supports_verbosity

__all__ = [
    "DEFAULT_CAPABILITIES",
    "ModelCapabilities",
    "get_model_capabilities",
    # Policy helpers
    "resolve_verbosity",
    "supports_verbosity",
]
