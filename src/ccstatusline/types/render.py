"""Per-render inputs shared by every widget."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ccstatusline.types.metrics import BlockMetrics, TokenMetrics
from ccstatusline.types.status import ContextWindowReport, StatusPayload


@dataclass
class WidgetItem:
    """One configured slot in the status line."""
    type: str
    raw_value: bool = False
    inverse: bool = False
    color: str = ""


@dataclass
class RenderContext:
    data: Optional[StatusPayload] = None
    token_metrics: Optional[TokenMetrics] = None
    block_metrics: Optional[BlockMetrics] = None
    session_duration_ms: Optional[int] = None
    block_duration: timedelta = timedelta(hours=5)
    now: Optional[datetime] = None
    is_preview: bool = False

    @property
    def context_window(self) -> Optional[ContextWindowReport]:
        if self.data is None:
            return None
        return self.data.context_window

    @property
    def model_id(self) -> Optional[str]:
        if self.data is None:
            return None
        return self.data.model_id
