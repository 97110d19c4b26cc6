"""Registry of every widget type the status line can render."""

from typing import Optional

from ccstatusline.services.block_detector import block_elapsed_ms
from ccstatusline.types.render import RenderContext
from ccstatusline.utils.context_percentage import calculate_context_percentage
from ccstatusline.utils.formatting import (
    format_cost,
    format_duration_ms,
    format_percentage,
)
from ccstatusline.widgets.simple_widget import SimpleWidget


# ---------------------------------------------------------------------------
# Value extractors
# ---------------------------------------------------------------------------


def _model_name(ctx: RenderContext) -> Optional[str]:
    if ctx.data is None:
        return None
    return ctx.data.model_display_name or ctx.data.model_id or None


def _metric(field_name: str):
    def extract(ctx: RenderContext) -> Optional[int]:
        if ctx.token_metrics is None:
            return None
        return getattr(ctx.token_metrics, field_name)
    return extract


def _call_usage(field_name: str):
    def extract(ctx: RenderContext) -> Optional[int]:
        report = ctx.context_window
        if report is None or report.current_usage is None:
            return None
        return getattr(report.current_usage, field_name)
    return extract


def _context_length(ctx: RenderContext) -> Optional[int]:
    report = ctx.context_window
    if report is not None and report.is_available:
        return report.total_input_tokens
    if ctx.token_metrics is not None:
        return ctx.token_metrics.context_length
    return None


def _has_context_source(ctx: RenderContext) -> bool:
    report = ctx.context_window
    return (report is not None and report.is_available) or ctx.token_metrics is not None


def _context_percentage(usable: bool):
    def extract(ctx: RenderContext) -> Optional[float]:
        if not _has_context_source(ctx):
            return None
        return calculate_context_percentage(ctx, usable=usable)
    return extract


def _conversation_content(ctx: RenderContext) -> Optional[int]:
    metrics = ctx.token_metrics
    if metrics is None:
        return None
    return max(0, metrics.context_length - metrics.system_overhead)


def _block_elapsed(ctx: RenderContext) -> Optional[int]:
    if ctx.block_metrics is None or ctx.now is None:
        return None
    return block_elapsed_ms(ctx.block_metrics, ctx.now, ctx.block_duration)


def _session_cost(ctx: RenderContext) -> Optional[float]:
    return ctx.data.total_cost_usd if ctx.data is not None else None


def _payload_text(field_name: str):
    def extract(ctx: RenderContext) -> Optional[str]:
        if ctx.data is None:
            return None
        return getattr(ctx.data, field_name) or None
    return extract


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

WIDGET_REGISTRY: dict[str, SimpleWidget] = {
    "model": SimpleWidget(
        name="Model",
        description="Model display name, or id when no name is reported",
        label="Model: ",
        preview_value="Claude",
        default_color="cyan",
        get_value=_model_name,
        formatter=str,
    ),
    "tokens-input": SimpleWidget(
        name="Tokens Input",
        description="Input tokens summed over the session",
        label="In: ",
        preview_value="15.2k",
        default_color="blue",
        get_value=_metric("input_tokens"),
    ),
    "tokens-output": SimpleWidget(
        name="Tokens Output",
        description="Output tokens summed over the session",
        label="Out: ",
        preview_value="3.4k",
        default_color="white",
        get_value=_metric("output_tokens"),
    ),
    "tokens-cached": SimpleWidget(
        name="Tokens Cached",
        description="Cache read tokens summed over the session",
        label="Cached: ",
        preview_value="12k",
        default_color="cyan",
        get_value=_metric("cached_tokens"),
    ),
    "tokens-total": SimpleWidget(
        name="Tokens Total",
        description="Input plus output tokens for the session",
        label="Total: ",
        preview_value="30.6k",
        default_color="cyan",
        get_value=_metric("total_tokens"),
    ),
    "context-length": SimpleWidget(
        name="Context Length",
        description="Shows the current context window size in tokens",
        label="Ctx: ",
        preview_value="18.6k",
        default_color="brightBlack",
        get_value=_context_length,
    ),
    "context-percentage": SimpleWidget(
        name="Context %",
        description="Shows percentage of context window used or remaining",
        label="Ctx: ",
        preview_value="9.3%",
        default_color="blue",
        get_value=_context_percentage(usable=False),
        formatter=format_percentage,
        supports_inverse=True,
    ),
    "context-percentage-usable": SimpleWidget(
        name="Context % (usable)",
        description="Shows percentage of usable context window used or remaining "
                    "(80% of max before auto-compact)",
        label="Ctx(u): ",
        preview_value="11.6%",
        default_color="green",
        get_value=_context_percentage(usable=True),
        formatter=format_percentage,
        supports_inverse=True,
    ),
    "session-clock": SimpleWidget(
        name="Session Clock",
        description="Time between the first and last transcript entries",
        label="Session: ",
        preview_value="2hr 15m",
        default_color="yellow",
        get_value=lambda ctx: ctx.session_duration_ms,
        formatter=format_duration_ms,
    ),
    "block-timer": SimpleWidget(
        name="Block Timer",
        description="Time elapsed in the current 5-hour usage block",
        label="Block: ",
        preview_value="3hr 45m",
        default_color="yellow",
        get_value=_block_elapsed,
        formatter=format_duration_ms,
    ),
    "session-cost": SimpleWidget(
        name="Session Cost",
        description="Total session cost in USD as reported by Claude Code",
        label="Cost: ",
        preview_value="$2.45",
        default_color="green",
        get_value=_session_cost,
        formatter=format_cost,
    ),
    "claude-session-id": SimpleWidget(
        name="Claude Session ID",
        description="Current Claude Code session id",
        label="Session ID: ",
        preview_value="preview-session-id",
        default_color="cyan",
        get_value=_payload_text("session_id"),
        formatter=str,
    ),
    "version": SimpleWidget(
        name="Version",
        description="Claude Code version",
        label="Version: ",
        preview_value="1.0.72",
        default_color="gray",
        get_value=_payload_text("version"),
        formatter=str,
    ),
    # Last-API-call widgets (from context_window.current_usage in stdin JSON)
    "call-input": SimpleWidget(
        name="Call Input",
        description="Last API call's non-cached input tokens",
        label="CIn:",
        preview_value="500",
        default_color="blue",
        get_value=_call_usage("input_tokens"),
    ),
    "call-output": SimpleWidget(
        name="Call Output",
        description="Last API call's output tokens",
        label="COut:",
        preview_value="1.2k",
        default_color="green",
        get_value=_call_usage("output_tokens"),
    ),
    "call-cache-read": SimpleWidget(
        name="Call Cache Read",
        description="Last API call's cache read tokens",
        label="CCR:",
        preview_value="80k",
        default_color="cyan",
        get_value=_call_usage("cache_read_input_tokens"),
    ),
    "call-cache-write": SimpleWidget(
        name="Call Cache Write",
        description="Last API call's cache write tokens",
        label="CCW:",
        preview_value="5k",
        default_color="yellow",
        get_value=_call_usage("cache_creation_input_tokens"),
    ),
    # Derived widgets (from transcript JSONL)
    "context-tokens": SimpleWidget(
        name="Context Tokens",
        description="Absolute context size in tokens (from transcript)",
        label="Ctx:",
        preview_value="161k",
        default_color="blue",
        get_value=_metric("context_length"),
    ),
    "system-overhead": SimpleWidget(
        name="System Overhead",
        description="System prompt + CLAUDE.md + tool definitions (approximate)",
        label="Sys:",
        preview_value="30k",
        default_color="gray",
        get_value=_metric("system_overhead"),
    ),
    "conversation-content": SimpleWidget(
        name="Conversation Content",
        description="Context added since session start (context minus system overhead)",
        label="Conv:",
        preview_value="131k",
        default_color="magenta",
        get_value=_conversation_content,
    ),
}


def get_widget(widget_type: str) -> Optional[SimpleWidget]:
    return WIDGET_REGISTRY.get(widget_type)


def is_known_widget_type(widget_type: str) -> bool:
    return widget_type in WIDGET_REGISTRY
