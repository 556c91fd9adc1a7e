"""Reader configuration: transcription backend enum and ReaderConfig dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TranscriptionBackend(str, Enum):
    """Available speech-to-text backends."""

    MOCK = "mock"
    ASSEMBLYAI = "assemblyai"


@dataclass(frozen=True)
class ReaderConfig:
    """Immutable product limits for the snippet reader.

    Snippets are tweet-sized (280 characters) and the scroll limit slider
    runs from 5 to 50 with 10 preselected.
    """

    char_budget: int = 280
    min_scroll_limit: int = 5
    max_scroll_limit: int = 50
    default_scroll_limit: int = 10

    def clamp_scroll_limit(self, value: int) -> int:
        """Pin *value* into the allowed slider range."""
        return max(self.min_scroll_limit, min(self.max_scroll_limit, value))


DEFAULT_READER_CONFIG = ReaderConfig()
