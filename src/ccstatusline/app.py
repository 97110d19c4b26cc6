"""Command-line entry point: read the status JSON on stdin, print one status line."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import orjson

from ccstatusline.services.block_detector import (
    collect_activity_timestamps,
    find_recent_transcripts,
    get_block_metrics,
)
from ccstatusline.services.config_manager import ConfigManager, parse_widget_list
from ccstatusline.services.status_input import load_status_payload
from ccstatusline.services.token_metrics import aggregate_token_metrics, session_duration_ms
from ccstatusline.services.transcript_reader import parse_timestamp, read_transcript
from ccstatusline.types.render import RenderContext
from ccstatusline.types.status import StatusPayload
from ccstatusline.widgets.registry import is_known_widget_type
from ccstatusline.widgets.renderer import render_status_line

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ccstatusline",
        description="Render a Claude Code status line from the status JSON on stdin.",
    )
    parser.add_argument("--config", metavar="PATH",
                        help="settings INI file (default: per-user config location)")
    parser.add_argument("--widgets", metavar="LIST",
                        help="comma-separated widget types, e.g. model,context-percentage:inverse")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--now", metavar="ISO8601",
                        help="render as if the current time were this instant")
    parser.add_argument("--debug", action="store_true", help="log debug output to stderr")
    return parser


def build_render_context(
    payload: StatusPayload,
    config: ConfigManager,
    now: datetime,
) -> RenderContext:
    """Gather every metric the widgets may need for one render cycle.

    The current transcript is read once and that snapshot feeds the token
    totals, the session clock and the block detector.
    """
    duration = config.session_duration()
    transcript = payload.transcript_path

    token_metrics = None
    duration_ms = None
    activity: list[datetime] = []
    if transcript:
        records = read_transcript(transcript)
        token_metrics = aggregate_token_metrics(records)
        duration_ms = session_duration_ms(records)
        activity = collect_activity_timestamps(records)

    other_sources: list[Path] = []
    if config.get_bool("blocks/scanAllProjects"):
        current = Path(transcript).resolve() if transcript else None
        other_sources = [
            path for path in find_recent_transcripts(config.projects_dir(), now, duration)
            if path.resolve() != current
        ]
    block_metrics = get_block_metrics(other_sources, now, duration, timestamps=activity)

    return RenderContext(
        data=payload,
        token_metrics=token_metrics,
        block_metrics=block_metrics,
        session_duration_ms=duration_ms,
        block_duration=duration,
        now=now,
    )


def _configure_logging(debug: bool):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(argv: Optional[list[str]] = None, stdin=None, stdout=None) -> int:
    """Render the status line. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout

    config = ConfigManager(settings_path=args.config)
    _configure_logging(args.debug or config.get_bool("advanced/debugLogging"))
    logger.debug("Settings file: %s", config.file_name)

    now = datetime.now(timezone.utc)
    if args.now:
        parsed = parse_timestamp(args.now)
        if parsed is None:
            logger.error("Invalid --now timestamp: %s", args.now)
            return 2
        now = parsed

    try:
        payload = load_status_payload(stdin.read())
    except (orjson.JSONDecodeError, ValueError) as e:
        logger.error("Invalid status JSON on stdin: %s", e)
        return 1

    items = parse_widget_list(args.widgets) if args.widgets else config.get_widget_items()
    for item in items:
        if not is_known_widget_type(item.type):
            logger.warning("Unknown widget type: %s", item.type)

    try:
        context = build_render_context(payload, config, now)
        line = render_status_line(
            items,
            context,
            separator=config.get_string("display/separator"),
            use_colors=not args.no_color and config.get_bool("display/colors"),
        )
    except Exception:
        logger.exception("Failed to render status line")
        return 1

    print(line, file=stdout)
    return 0
