"""
Capability-driven verbosity policy.

All verbosity decisions flow through these helpers; nothing else in the
package inspects model names to decide whether verbosity applies.
"""

from typing import Optional

from ...config.constants import MATERIALIZE_DEFAULT_VERBOSITY
from ...models.verbosity import DEFAULT_VERBOSITY, Verbosity
from .models import get_model_capabilities


def supports_verbosity(model_id: str) -> bool:
    """
    Check whether a model accepts a verbosity hint.

    Only the GPT-5 family and its variants qualify. Unknown and future model
    ids are treated as unsupported.

    Args:
        model_id: The model identifier

    Returns:
        True if requests for this model may carry text.verbosity
    """
    return get_model_capabilities(model_id).supports_verbosity


def resolve_verbosity(
    model_id: str,
    configured: Optional[Verbosity],
    materialize_default: bool = MATERIALIZE_DEFAULT_VERBOSITY
) -> Optional[Verbosity]:
    """
    Decide which verbosity, if any, a request for this model should carry.

    Args:
        model_id: The model identifier
        configured: The user-configured verbosity, None if unset
        materialize_default: Fill in the family default when unset

    Returns:
        The verbosity to send, or None if the text field must be omitted
    """
    capabilities = get_model_capabilities(model_id)
    if not capabilities.supports_verbosity:
        return None

    if configured is not None:
        return configured

    if not materialize_default:
        return None

    return capabilities.default_verbosity or DEFAULT_VERBOSITY
