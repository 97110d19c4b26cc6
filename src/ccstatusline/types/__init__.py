"""Type definitions for ccstatusline."""

from ccstatusline.types.messages import TokenUsage, TranscriptRecord
from ccstatusline.types.metrics import (
    BlockMetrics,
    ContextConfig,
    SessionBlock,
    TokenMetrics,
)
from ccstatusline.types.status import (
    ContextWindowReport,
    CurrentUsage,
    StatusPayload,
)
from ccstatusline.types.render import RenderContext, WidgetItem

__all__ = [
    "TokenUsage",
    "TranscriptRecord",
    "BlockMetrics",
    "ContextConfig",
    "SessionBlock",
    "TokenMetrics",
    "ContextWindowReport",
    "CurrentUsage",
    "StatusPayload",
    "RenderContext",
    "WidgetItem",
]
