"""Token usage aggregation over a transcript."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ccstatusline.services.transcript_reader import stream_transcript
from ccstatusline.types.messages import TranscriptRecord
from ccstatusline.types.metrics import TokenMetrics

logger = logging.getLogger(__name__)


def get_token_metrics(transcript_path: str | Path) -> TokenMetrics:
    """Read a transcript and aggregate its token usage.

    Missing or unreadable files produce an all-zero TokenMetrics.
    """
    return aggregate_token_metrics(stream_transcript(transcript_path))


def aggregate_token_metrics(records: Iterable[TranscriptRecord]) -> TokenMetrics:
    """Aggregate token counts over eligible records in file order.

    Sums run across every eligible record. context_length comes from the
    latest eligible record and system_overhead from the first one.
    """
    input_tokens = 0
    output_tokens = 0
    cached_tokens = 0
    first: Optional[TranscriptRecord] = None
    latest: Optional[TranscriptRecord] = None

    for record in records:
        if not record.is_eligible:
            continue
        usage = record.usage
        input_tokens += usage.input_tokens
        output_tokens += usage.output_tokens
        cached_tokens += usage.cache_read_input_tokens
        if first is None:
            first = record
        latest = record

    if first is None:
        return TokenMetrics()

    return TokenMetrics(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cached_tokens=cached_tokens,
        total_tokens=input_tokens + output_tokens,
        context_length=latest.usage.context_tokens,
        system_overhead=first.usage.context_tokens,
    )


def get_session_duration_ms(transcript_path: str | Path) -> Optional[int]:
    return session_duration_ms(stream_transcript(transcript_path))


def session_duration_ms(records: Iterable[TranscriptRecord]) -> Optional[int]:
    """Milliseconds between the first and last timestamped records, or None."""
    first_ts = None
    last_ts = None
    for record in records:
        if record.timestamp is None:
            continue
        if first_ts is None:
            first_ts = record.timestamp
        last_ts = record.timestamp

    if first_ts is None:
        return None
    return max(0, int((last_ts - first_ts).total_seconds() * 1000))
