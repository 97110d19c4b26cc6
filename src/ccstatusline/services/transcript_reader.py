"""Streaming reader for Claude Code transcript JSONL files."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

import orjson

from ccstatusline.types.messages import TokenUsage, TranscriptRecord

logger = logging.getLogger(__name__)


def read_transcript(file_path: str | Path) -> list[TranscriptRecord]:
    """Read an entire transcript file into a list of TranscriptRecord objects."""
    return list(stream_transcript(file_path))


def stream_transcript(file_path: str | Path) -> Iterator[TranscriptRecord]:
    """Stream-parse a transcript file, yielding one TranscriptRecord per line.

    Blank lines and lines that are not a JSON object are skipped. A missing or
    unreadable file yields nothing.
    """
    path = Path(file_path)
    if not path.is_file():
        logger.debug("Transcript not found: %s", path)
        return

    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Cannot open transcript %s: %s", path, e)
        return

    line_num = 0
    with f:
        for line in f:
            line_num += 1
            line = line.strip()
            if not line:
                continue

            try:
                raw = orjson.loads(line)
            except orjson.JSONDecodeError as e:
                logger.debug("Malformed JSON at line %d in %s: %s", line_num, path.name, e)
                continue

            if not isinstance(raw, dict):
                continue

            yield parse_record(raw)


def parse_record(raw: dict) -> TranscriptRecord:
    """Parse a raw JSON dict into a TranscriptRecord. Unknown fields are ignored."""
    usage = None
    message = raw.get("message")
    if isinstance(message, dict):
        raw_usage = message.get("usage")
        if isinstance(raw_usage, dict):
            usage = _parse_usage(raw_usage)

    return TranscriptRecord(
        timestamp=parse_timestamp(raw.get("timestamp")),
        usage=usage,
        is_sidechain=raw.get("isSidechain") is True,
        is_api_error=raw.get("isApiErrorMessage") is True,
    )


def _parse_usage(raw_usage: dict) -> TokenUsage:
    input_tokens = _as_int(raw_usage.get("input_tokens"))
    output_tokens = _as_int(raw_usage.get("output_tokens"))
    return TokenUsage(
        input_tokens=input_tokens or 0,
        output_tokens=output_tokens or 0,
        cache_read_input_tokens=_as_int(raw_usage.get("cache_read_input_tokens")) or 0,
        cache_creation_input_tokens=_as_int(raw_usage.get("cache_creation_input_tokens")) or 0,
        complete=input_tokens is not None and output_tokens is not None,
    )


def _as_int(value) -> Optional[int]:
    # bool is an int subclass but never a token count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def parse_timestamp(ts_value) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp string into an aware UTC datetime.

    Naive timestamps are taken as UTC. Anything else returns None.
    """
    if not isinstance(ts_value, str) or not ts_value:
        return None
    try:
        # ISO 8601 format: "2026-02-13T12:00:00.000Z"
        dt = datetime.fromisoformat(ts_value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
