# Model family base configurations
from typing import Any, Dict, Optional

from .constants import DEFAULT_VERBOSITY_TOKEN, PROVIDER_PREFIXES

# Base configurations for model families
MODEL_FAMILIES = {
    "gpt-3.5": {
        "provider": "openai",
        "supports_verbosity": False,
        "default_verbosity": None,
    },
    "gpt-4": {
        "provider": "openai",
        "supports_verbosity": False,
        "default_verbosity": None,
    },
    "gpt-4o": {
        "provider": "openai",
        "supports_verbosity": False,
        "default_verbosity": None,
    },
    "gpt-4.1": {
        "provider": "openai",
        "supports_verbosity": False,
        "default_verbosity": None,
    },
    "o1": {
        "provider": "openai",
        "supports_verbosity": False,
        "default_verbosity": None,
    },
    "o3": {
        "provider": "openai",
        "supports_verbosity": False,
        "default_verbosity": None,
    },
    "o4": {
        "provider": "openai",
        "supports_verbosity": False,
        "default_verbosity": None,
    },
    # GPT-5 and its variants (mini, nano, chat-latest, dated snapshots, 5.x)
    "gpt-5": {
        "provider": "openai",
        "supports_verbosity": True,
        "default_verbosity": DEFAULT_VERBOSITY_TOKEN,
    },
}

# A family slug may be continued by one of these to form a variant id
_VARIANT_SEPARATORS = ("-", ".")

# Longest slug first so "gpt-4.1" is tried before "gpt-4"
_FAMILIES_BY_LENGTH = sorted(MODEL_FAMILIES, key=len, reverse=True)


def _normalize_model_id(model_id: str) -> str:
    normalized = model_id.strip().lower()
    for prefix in PROVIDER_PREFIXES:
        if normalized.startswith(prefix):
            return normalized[len(prefix):]
    return normalized


def find_model_family(model_id: str) -> Optional[str]:
    """Return the family slug a model id belongs to, or None if unrecognized.

    A model id belongs to a family when it equals the family slug or extends
    it after a '-' or '.' separator, e.g. "gpt-5-mini", "gpt-5-2025-08-07"
    and "gpt-5.1" all belong to "gpt-5" while "gpt-50" belongs to nothing.

    Args:
        model_id: The model identifier to classify

    Returns:
        The matching key of MODEL_FAMILIES, or None
    """
    if not isinstance(model_id, str):
        return None

    normalized = _normalize_model_id(model_id)
    for family in _FAMILIES_BY_LENGTH:
        if normalized == family:
            return family
        if normalized.startswith(family) and normalized[len(family)] in _VARIANT_SEPARATORS:
            return family
    return None


def get_family_config(family: str) -> Dict[str, Any]:
    """Return a copy of the base configuration for a model family."""
    if family not in MODEL_FAMILIES:
        raise ValueError(f"Unknown model family: {family}")

    return MODEL_FAMILIES[family].copy()
