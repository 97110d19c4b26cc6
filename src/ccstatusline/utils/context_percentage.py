"""Context window usage percentage shared by all percentage widgets."""

from ccstatusline.types.render import RenderContext
from ccstatusline.utils.model_context import get_context_config

# Auto-compaction kicks in at this share of the window
USABLE_RATIO = 0.8


def calculate_context_percentage(context: RenderContext, usable: bool = False) -> float:
    """Percentage of the context window in use, clamped to [0, 100].

    The live context_window report wins whenever it carries a window size.
    Otherwise the transcript's context_length is divided by the tier
    resolved from the model id. With ``usable`` the denominator is the
    usable share instead.
    """
    report = context.context_window
    if report is not None and report.is_available:
        capacity = report.context_window_size * USABLE_RATIO if usable else report.context_window_size
        return _clamp(report.total_input_tokens / capacity * 100)

    if context.token_metrics is None:
        return 0.0

    config = get_context_config(context.model_id)
    capacity = config.usable_tokens if usable else config.max_tokens
    return _clamp(context.token_metrics.context_length / capacity * 100)


def display_percentage(percentage: float, inverse: bool = False) -> float:
    """Used percentage, or remaining percentage when inverse."""
    return 100.0 - percentage if inverse else percentage


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))
