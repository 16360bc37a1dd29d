"""
Provider Payloads Layer

Provider-specific request shaping. Each provider module translates the
normalized verbosity setting into the provider's request format.
"""

from .openai import apply_verbosity, augment_request, build_responses_api_payload

__all__ = [
    "apply_verbosity",
    "augment_request",
    "build_responses_api_payload",
]
