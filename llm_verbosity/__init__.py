"""
LLM Verbosity - model_verbosity configuration for OpenAI Responses API requests.

This package resolves the `model_verbosity` configuration value and attaches
it to outbound requests as `text.verbosity` for models that support it:
- Verbosity parsing and canonical tokens (low, medium, high)
- Model family detection for the GPT-5 family
- Request payload augmentation that omits `text` for other models
"""

__version__ = "0.1.0"

from .core.capabilities import (
    DEFAULT_CAPABILITIES,
    ModelCapabilities,
    get_model_capabilities,
    resolve_verbosity,
    supports_verbosity,
)
from .errors import ConfigError, InvalidConfigValue
from .models.config import VerbosityConfig
from .models.verbosity import (
    DEFAULT_VERBOSITY,
    TextOptions,
    Verbosity,
    parse_verbosity,
    verbosity_to_token,
)
from .providers.openai import (
    apply_verbosity,
    augment_request,
    build_responses_api_payload,
    build_text_config,
)

__all__ = [
    # Models
    "Verbosity",
    "DEFAULT_VERBOSITY",
    "TextOptions",
    "VerbosityConfig",
    "parse_verbosity",
    "verbosity_to_token",

    # Capabilities
    "ModelCapabilities",
    "DEFAULT_CAPABILITIES",
    "get_model_capabilities",
    "supports_verbosity",
    "resolve_verbosity",

    # Payloads
    "apply_verbosity",
    "augment_request",
    "build_responses_api_payload",
    "build_text_config",

    # Errors
    "ConfigError",
    "InvalidConfigValue",
]
