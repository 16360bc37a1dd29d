"""Verbosity values and their request representation."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from ..config.constants import (
    DEFAULT_VERBOSITY_TOKEN,
    MODEL_VERBOSITY_KEY,
    VERBOSITY_FIELD,
    VERBOSITY_TOKENS,
)
from ..errors import InvalidConfigValue


class Verbosity(str, Enum):
    """Output verbosity hint for GPT-5 family models."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, token: Any, field: str = MODEL_VERBOSITY_KEY) -> "Verbosity":
        return parse_verbosity(token, field)

    @property
    def token(self) -> str:
        return verbosity_to_token(self)


DEFAULT_VERBOSITY = Verbosity(DEFAULT_VERBOSITY_TOKEN)

_VERBOSITY_BY_TOKEN = {member.value: member for member in Verbosity}


def parse_verbosity(token: Any, field: str = MODEL_VERBOSITY_KEY) -> Verbosity:
    """
    Parse a configuration token into a Verbosity.

    Matching is case-insensitive but otherwise exact: surrounding whitespace
    is not stripped, so "medium " is rejected.

    Args:
        token: Raw configuration value
        field: Configuration key the value came from, used in errors

    Returns:
        The matching Verbosity member

    Raises:
        InvalidConfigValue: If the token is not one of low, medium, high
    """
    if isinstance(token, Verbosity):
        return token
    if isinstance(token, str):
        verbosity = _VERBOSITY_BY_TOKEN.get(token.lower())
        if verbosity is not None:
            return verbosity
    raise InvalidConfigValue(field, token, VERBOSITY_TOKENS)


def verbosity_to_token(verbosity: Verbosity) -> str:
    """Return the canonical lowercase token for a Verbosity."""
    return verbosity.value


class TextOptions(BaseModel):
    """The `text` sub-object of a Responses API request."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    verbosity: Verbosity = Field(..., description="Output verbosity for the response")

    def to_payload(self) -> Dict[str, str]:
        return {VERBOSITY_FIELD: verbosity_to_token(self.verbosity)}
