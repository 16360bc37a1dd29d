"""OpenAI Responses API payload helpers."""

from .payloads import (
    apply_verbosity,
    augment_request,
    build_responses_api_payload,
    build_text_config,
)

__all__ = [
    "apply_verbosity",
    "augment_request",
    "build_responses_api_payload",
    "build_text_config",
]
