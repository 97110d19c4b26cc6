"""Record-level types for parsed transcript JSONL data."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cache_read_input_tokens: int = 0
    cache_creation_input_tokens: int = 0
    # False when input_tokens or output_tokens was missing or non-numeric
    complete: bool = True

    @property
    def context_tokens(self) -> int:
        """Tokens occupying the context window for this call."""
        return (self.input_tokens + self.cache_creation_input_tokens +
                self.cache_read_input_tokens)


@dataclass
class TranscriptRecord:
    timestamp: Optional[datetime] = None
    usage: Optional[TokenUsage] = None
    is_sidechain: bool = False
    is_api_error: bool = False

    @property
    def is_eligible(self) -> bool:
        """Counts toward token totals: has usage, main chain, not an API error."""
        return self.usage is not None and not self.is_sidechain and not self.is_api_error
