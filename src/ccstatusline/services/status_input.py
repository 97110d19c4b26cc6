"""Parser for the status JSON Claude Code pipes to the status line command."""

import logging
from typing import Optional

import orjson

from ccstatusline.types.status import ContextWindowReport, CurrentUsage, StatusPayload

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({
    "session_id",
    "transcript_path",
    "cwd",
    "model",
    "version",
    "cost",
    "context_window",
})

_CONTEXT_WINDOW_KEYS = frozenset({
    "total_input_tokens",
    "total_output_tokens",
    "context_window_size",
    "current_usage",
})


def load_status_payload(data: bytes | str) -> StatusPayload:
    """Decode stdin bytes into a StatusPayload.

    Raises orjson.JSONDecodeError on invalid JSON and ValueError when the
    document is not an object; the CLI treats both as fatal.
    """
    raw = orjson.loads(data)
    if not isinstance(raw, dict):
        raise ValueError("status payload must be a JSON object")
    return parse_status_payload(raw)


def parse_status_payload(raw: dict) -> StatusPayload:
    """Build a StatusPayload from a decoded dict. Fields of the wrong type are dropped."""
    model_id, model_name = _parse_model(raw.get("model"))

    cost = raw.get("cost")
    total_cost = None
    if isinstance(cost, dict):
        total_cost = _as_number(cost.get("total_cost_usd"))

    return StatusPayload(
        session_id=_as_str(raw.get("session_id")),
        transcript_path=_as_str(raw.get("transcript_path")),
        cwd=_as_str(raw.get("cwd")),
        model_id=model_id,
        model_display_name=model_name,
        version=_as_str(raw.get("version")),
        total_cost_usd=total_cost,
        context_window=parse_context_window(raw.get("context_window")),
        extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
    )


def parse_context_window(raw) -> Optional[ContextWindowReport]:
    """Parse the context_window report; unknown keys are kept in ``extra``."""
    if not isinstance(raw, dict):
        return None

    current_usage = None
    raw_usage = raw.get("current_usage")
    if isinstance(raw_usage, dict):
        current_usage = CurrentUsage(
            input_tokens=_as_int(raw_usage.get("input_tokens")),
            output_tokens=_as_int(raw_usage.get("output_tokens")),
            cache_creation_input_tokens=_as_int(raw_usage.get("cache_creation_input_tokens")),
            cache_read_input_tokens=_as_int(raw_usage.get("cache_read_input_tokens")),
        )

    return ContextWindowReport(
        total_input_tokens=_as_int(raw.get("total_input_tokens")) or 0,
        total_output_tokens=_as_int(raw.get("total_output_tokens")) or 0,
        context_window_size=_as_int(raw.get("context_window_size")) or 0,
        current_usage=current_usage,
        extra={k: v for k, v in raw.items() if k not in _CONTEXT_WINDOW_KEYS},
    )


def _parse_model(model) -> tuple[Optional[str], str]:
    """Model is either a bare id string or {"id": ..., "display_name": ...}."""
    if isinstance(model, str):
        return (model or None), model
    if isinstance(model, dict):
        model_id = _as_str(model.get("id")) or None
        return model_id, _as_str(model.get("display_name")) or (model_id or "")
    return None, ""


def _as_str(value) -> str:
    return value if isinstance(value, str) else ""


def _as_number(value) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _as_int(value) -> Optional[int]:
    number = _as_number(value)
    return int(number) if number is not None else None
