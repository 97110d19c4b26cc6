"""Aggregate metric types produced by the metrics services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenMetrics:
    input_tokens: int = 0
    output_tokens: int = 0
    cached_tokens: int = 0
    total_tokens: int = 0
    context_length: int = 0
    system_overhead: int = 0


@dataclass(frozen=True)
class SessionBlock:
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


@dataclass(frozen=True)
class BlockMetrics:
    start_time: datetime
    last_activity: datetime


@dataclass(frozen=True)
class ContextConfig:
    max_tokens: int
    usable_tokens: int
