"""Types for the live status payload piped in on stdin."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CurrentUsage:
    """Token counts of the most recent API call."""
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None


@dataclass
class ContextWindowReport:
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    context_window_size: int = 0
    current_usage: Optional[CurrentUsage] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_available(self) -> bool:
        return self.context_window_size > 0


@dataclass
class StatusPayload:
    session_id: str = ""
    transcript_path: str = ""
    cwd: str = ""
    model_id: Optional[str] = None
    model_display_name: str = ""
    version: str = ""
    total_cost_usd: Optional[float] = None
    context_window: Optional[ContextWindowReport] = None
    extra: dict[str, Any] = field(default_factory=dict)
