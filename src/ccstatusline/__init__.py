"""Claude Code status line with transcript-based session metrics."""

__version__ = "0.1.0"
