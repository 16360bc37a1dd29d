from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config.constants import MATERIALIZE_DEFAULT_VERBOSITY, MODEL_VERBOSITY_KEY
from .verbosity import Verbosity, parse_verbosity


class VerbosityConfig(BaseModel):
    """
    The slice of user configuration that drives verbosity control.

    The configuration loader owns the full config; this model only reads the
    `model` and `model_verbosity` keys out of what it supplies. Any other keys
    are ignored. An invalid `model_verbosity` raises InvalidConfigValue at
    construction time so the whole load fails before a request is built.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    model: str = Field(..., min_length=1, description="Model identifier")
    model_verbosity: Optional[Verbosity] = Field(
        None,
        description="Configured verbosity; None when the key is absent"
    )
    materialize_default_verbosity: bool = Field(
        MATERIALIZE_DEFAULT_VERBOSITY,
        description="Send the family default verbosity when none is configured"
    )

    @field_validator("model_verbosity", mode="before")
    @classmethod
    def _parse_model_verbosity(cls, value: Any) -> Optional[Verbosity]:
        # InvalidConfigValue is not a ValueError, so it propagates unwrapped
        if value is None:
            return None
        return parse_verbosity(value, MODEL_VERBOSITY_KEY)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "VerbosityConfig":
        """Build from the mapping produced by the configuration loader."""
        return cls.model_validate(dict(raw))

    @property
    def effective_verbosity(self) -> Optional[Verbosity]:
        """The verbosity a request for this config would carry, if any."""
        from ..core.capabilities.policy import resolve_verbosity

        return resolve_verbosity(
            self.model,
            self.model_verbosity,
            materialize_default=self.materialize_default_verbosity,
        )
