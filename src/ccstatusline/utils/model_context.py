"""Context window capacity by model identifier."""

from typing import Optional

from ccstatusline.types.metrics import ContextConfig

DEFAULT_CONTEXT = ContextConfig(max_tokens=200_000, usable_tokens=160_000)
EXTENDED_CONTEXT = ContextConfig(max_tokens=1_000_000, usable_tokens=800_000)

# Suffix marking the long-context beta on any model family
LONG_CONTEXT_MARKER = "[1m]"


def get_context_config(model_id: Optional[str] = None) -> ContextConfig:
    """Resolve the context window tier for a model id.

    Only the [1m] marker selects the extended tier; everything else,
    including an absent or unknown id, gets the 200k default.
    """
    if not model_id:
        return DEFAULT_CONTEXT
    if LONG_CONTEXT_MARKER in model_id.lower():
        return EXTENDED_CONTEXT
    return DEFAULT_CONTEXT
