"""Session block detection from transcript activity timestamps.

A session block is a fixed-length usage window (five hours by default) that
opens on the hour of the first message sent after a long enough break. The
detector finds the run of continuous activity leading up to ``now``, splits
it into back-to-back blocks and reports the block ``now`` falls into.
"""

import logging
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterable, Optional

from ccstatusline.services.transcript_reader import stream_transcript
from ccstatusline.types.messages import TranscriptRecord
from ccstatusline.types.metrics import BlockMetrics, SessionBlock

logger = logging.getLogger(__name__)

DEFAULT_SESSION_DURATION = timedelta(hours=5)


def collect_activity_timestamps(records: Iterable[TranscriptRecord]) -> list[datetime]:
    """Timestamps of records that count as activity.

    A record counts when it carries numeric input and output token counts,
    is on the main chain and has a valid timestamp.
    """
    timestamps: list[datetime] = []
    for record in records:
        usage = record.usage
        if usage is None or not usage.complete:
            continue
        if record.is_sidechain:
            continue
        if record.timestamp is None:
            continue
        timestamps.append(record.timestamp)
    return timestamps


def floor_to_hour(instant: datetime) -> datetime:
    """Zero minutes, seconds and microseconds in UTC."""
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    return instant.replace(minute=0, second=0, microsecond=0)


def find_active_block(
    timestamps: list[datetime],
    now: datetime,
    session_duration: timedelta = DEFAULT_SESSION_DURATION,
) -> Optional[SessionBlock]:
    """Return the block containing ``now``, or None when the user is idle."""
    if not timestamps:
        return None

    newest_first = sorted(timestamps, reverse=True)
    most_recent = newest_first[0]
    if now - most_recent > session_duration:
        return None

    # Walk back while gaps stay under the session length; a gap exactly
    # equal to it ends the run.
    continuous_start = most_recent
    for i in range(1, len(newest_first)):
        gap = newest_first[i - 1] - newest_first[i]
        if gap >= session_duration:
            break
        continuous_start = newest_first[i]

    oldest_first = sorted(timestamps)
    blocks: list[SessionBlock] = []
    current: Optional[SessionBlock] = None
    for ts in oldest_first:
        if ts < continuous_start:
            continue
        if current is None or ts > current.end:
            start = floor_to_hour(ts)
            current = SessionBlock(start=start, end=start + session_duration)
            blocks.append(current)

    for block in blocks:
        if not block.contains(now):
            continue
        if any(block.contains(ts) for ts in timestamps):
            return block

    return None


def find_block_start(
    timestamps: list[datetime],
    now: datetime,
    session_duration: timedelta = DEFAULT_SESSION_DURATION,
) -> Optional[datetime]:
    block = find_active_block(timestamps, now, session_duration)
    return block.start if block is not None else None


def get_block_metrics(
    transcript_paths: Iterable[str | Path],
    now: Optional[datetime] = None,
    session_duration: timedelta = DEFAULT_SESSION_DURATION,
    timestamps: Optional[Iterable[datetime]] = None,
) -> Optional[BlockMetrics]:
    """Detect the active block across one or more transcript files.

    ``timestamps`` adds activity already collected by the caller, so a
    transcript that has been read once is not read again. Unreadable files
    and malformed lines are skipped; no activity yields None.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    timestamps = list(timestamps) if timestamps is not None else []
    for path in transcript_paths:
        timestamps.extend(collect_activity_timestamps(stream_transcript(path)))

    block = find_active_block(timestamps, now, session_duration)
    if block is None:
        return None

    last_activity = max(ts for ts in timestamps if block.contains(ts))
    return BlockMetrics(start_time=block.start, last_activity=last_activity)


def find_recent_transcripts(
    projects_root: str | Path,
    now: Optional[datetime] = None,
    session_duration: timedelta = DEFAULT_SESSION_DURATION,
) -> list[Path]:
    """All transcript files under projects_root modified within the session length.

    Anything older cannot contribute to a block that still contains ``now``.
    """
    root = Path(projects_root).expanduser()
    if not root.is_dir():
        logger.debug("Projects directory not found: %s", root)
        return []

    cutoff = (now.timestamp() if now is not None else time.time()) - session_duration.total_seconds()
    recent: list[Path] = []
    for path in root.rglob("*.jsonl"):
        try:
            if path.stat().st_mtime >= cutoff:
                recent.append(path)
        except OSError:
            continue
    return sorted(recent)


def block_elapsed_ms(
    block: BlockMetrics,
    now: datetime,
    session_duration: timedelta = DEFAULT_SESSION_DURATION,
) -> int:
    """Milliseconds since the block started, clamped to the block length."""
    elapsed = now - block.start_time
    elapsed = max(timedelta(0), min(elapsed, session_duration))
    return int(elapsed.total_seconds() * 1000)
