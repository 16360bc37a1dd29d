from typing import Any, Dict, Mapping, Optional

from openai.types.responses import ResponseTextConfigParam

from ...config.constants import MATERIALIZE_DEFAULT_VERBOSITY, TEXT_FIELD, VERBOSITY_FIELD
from ...core.capabilities import resolve_verbosity, supports_verbosity
from ...models.config import VerbosityConfig
from ...models.verbosity import TextOptions, Verbosity, parse_verbosity, verbosity_to_token
from ...observability.logging import ComponentLogger

logger = ComponentLogger("payloads")


def build_text_config(
    verbosity: Verbosity,
    base: Optional[Mapping[str, Any]] = None,
) -> ResponseTextConfigParam:
    """Build the `text` field for a Responses API request.

    Keys already present in `base` (such as a structured output `format`)
    are kept; `verbosity` is set or replaced.
    """
    text_config: Dict[str, Any] = dict(base) if base else {}
    text_config.update(TextOptions(verbosity=verbosity).to_payload())
    return text_config


def _strip_verbosity(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy the payload without any `text.verbosity` set upstream.

    A `text` config left empty by the removal is dropped entirely.
    """
    result = dict(payload)
    text_config = result.get(TEXT_FIELD)
    if isinstance(text_config, Mapping) and VERBOSITY_FIELD in text_config:
        remaining = {k: v for k, v in text_config.items() if k != VERBOSITY_FIELD}
        if remaining:
            result[TEXT_FIELD] = remaining
        else:
            del result[TEXT_FIELD]
    return result


def apply_verbosity(
    payload: Mapping[str, Any],
    model_id: str,
    verbosity: Optional[Verbosity] = None,
    *,
    materialize_default: bool = MATERIALIZE_DEFAULT_VERBOSITY,
) -> Dict[str, Any]:
    """Attach `text.verbosity` to a request payload when the model supports it.

    The input payload is never mutated and only its `text` key is written.
    Any `verbosity` already present under `text` is discarded, so the only
    verbosity a request can carry is the one resolved here. For models
    outside the GPT-5 family no verbosity is attached however it is
    configured. For supported models an unset verbosity falls back to the
    family default unless `materialize_default` is False, in which case the
    field is left out and the service applies its own default.

    Args:
        payload: The request skeleton built so far
        model_id: Model the request targets
        verbosity: Configured verbosity or token, None if the user did not set one
        materialize_default: Send the default verbosity explicitly

    Returns:
        A new payload dict

    Raises:
        InvalidConfigValue: If verbosity is a string outside low, medium, high
    """
    if verbosity is not None:
        verbosity = parse_verbosity(verbosity)

    result = _strip_verbosity(payload)

    if not supports_verbosity(model_id):
        if verbosity is not None:
            logger.warning(
                "model_verbosity is set but ignored as the model does not support verbosity",
                model=model_id,
                verbosity=verbosity_to_token(verbosity),
            )
        return result

    effective = resolve_verbosity(model_id, verbosity, materialize_default=materialize_default)
    if effective is None:
        return result

    result[TEXT_FIELD] = build_text_config(effective, result.get(TEXT_FIELD))
    logger.debug(
        "Attached text.verbosity",
        model=model_id,
        verbosity=verbosity_to_token(effective),
        defaulted=verbosity is None,
    )
    return result


augment_request = apply_verbosity


def build_responses_api_payload(
    config: VerbosityConfig,
    input_items: Any,
    instructions: Optional[str] = None,
    max_output_tokens: Optional[int] = None,
    text_config: Optional[dict] = None,
) -> Dict[str, Any]:
    """Build a Responses API payload with verbosity applied from config.

    Optional fields left as None are omitted rather than sent as null.
    """
    responses_payload: Dict[str, Any] = {
        "model": config.model,
        "input": input_items,
    }

    if instructions is not None:
        responses_payload["instructions"] = instructions
    if max_output_tokens is not None:
        responses_payload["max_output_tokens"] = max_output_tokens
    if text_config is not None:
        responses_payload[TEXT_FIELD] = dict(text_config)

    return apply_verbosity(
        responses_payload,
        config.model,
        config.model_verbosity,
        materialize_default=config.materialize_default_verbosity,
    )
