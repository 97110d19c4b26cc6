"""Services for ccstatusline."""

from ccstatusline.services.transcript_reader import read_transcript, stream_transcript
from ccstatusline.services.token_metrics import (
    aggregate_token_metrics,
    get_session_duration_ms,
    get_token_metrics,
    session_duration_ms,
)
from ccstatusline.services.block_detector import (
    find_active_block,
    find_block_start,
    get_block_metrics,
)
from ccstatusline.services.status_input import load_status_payload, parse_status_payload
from ccstatusline.services.config_manager import ConfigManager

__all__ = [
    "read_transcript",
    "stream_transcript",
    "aggregate_token_metrics",
    "get_session_duration_ms",
    "get_token_metrics",
    "session_duration_ms",
    "find_active_block",
    "find_block_start",
    "get_block_metrics",
    "load_status_payload",
    "parse_status_payload",
    "ConfigManager",
]
