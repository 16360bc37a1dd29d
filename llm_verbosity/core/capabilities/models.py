"""
Model capability models for verbosity feature detection.

Capabilities are derived from the model family table so that callers branch
on what a model supports instead of on hardcoded model names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config.model_families import find_model_family, get_family_config
from ...models.verbosity import Verbosity


class ModelCapabilities(BaseModel):
    """Verbosity-related capabilities of a model."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    family: Optional[str] = Field(None, description="Model family slug, None if unrecognized")
    supports_verbosity: bool = Field(False, description="Accepts text.verbosity in Responses API requests")
    default_verbosity: Optional[Verbosity] = Field(None, description="Verbosity used when none is configured")


# Default capabilities for unknown models
DEFAULT_CAPABILITIES = ModelCapabilities(
    family=None,
    supports_verbosity=False,
    default_verbosity=None,
)


def get_model_capabilities(model_id: str) -> ModelCapabilities:
    """Get capabilities for a specific model, with fallback to defaults."""
    family = find_model_family(model_id)
    if family is None:
        return DEFAULT_CAPABILITIES

    config = get_family_config(family)
    default_verbosity = config.get("default_verbosity")
    return ModelCapabilities(
        family=family,
        supports_verbosity=bool(config.get("supports_verbosity", False)),
        default_verbosity=Verbosity(default_verbosity) if default_verbosity else None,
    )
