"""Reveal gate: progressive, scroll-limited disclosure of transcript snippets.

The gate is an immutable value. ``reveal`` is the only transition and it never
decrements; starting over means calling ``start_reveal`` again.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from src.reader_config import DEFAULT_READER_CONFIG
from src.snippets.segmenter import segment_transcript


@dataclass(frozen=True)
class RevealState:
    """Snippets of one transcript plus how far the reader has got through them."""

    snippets: tuple[str, ...]
    scroll_limit: int
    revealed: int = 0
    scrolls_used: int = 0

    @property
    def total(self) -> int:
        return len(self.snippets)

    @property
    def visible(self) -> tuple[str, ...]:
        return self.snippets[: self.revealed]

    @property
    def remaining_scrolls(self) -> int:
        return self.scroll_limit - self.scrolls_used

    @property
    def has_more(self) -> bool:
        return self.revealed < self.total

    @property
    def fully_revealed(self) -> bool:
        return self.revealed == self.total

    @property
    def limit_reached(self) -> bool:
        return self.scrolls_used == self.scroll_limit

    @property
    def can_reveal(self) -> bool:
        return self.scrolls_used < self.scroll_limit and self.revealed < self.total

    @property
    def progress(self) -> float:
        """Fraction of the scroll budget consumed, in ``[0, 1]``."""
        if self.scroll_limit == 0:
            return 0.0
        return self.scrolls_used / self.scroll_limit

    def share_text(self) -> str:
        """Visible snippets joined by blank lines, ready to copy or share."""
        return "\n\n".join(self.visible)


def start_reveal(snippets: Sequence[str], scroll_limit: int) -> RevealState:
    """Create a fresh gate with the first snippet already shown.

    Raises:
        ValueError: If *scroll_limit* is negative.
    """
    if scroll_limit < 0:
        raise ValueError(f"scroll_limit must be non-negative, got {scroll_limit}")
    items = tuple(snippets)
    return RevealState(
        snippets=items,
        scroll_limit=scroll_limit,
        revealed=1 if items else 0,
        scrolls_used=0,
    )


def start_reveal_for_transcript(
    text: str,
    scroll_limit: int,
    char_budget: int = DEFAULT_READER_CONFIG.char_budget,
) -> RevealState:
    """Segment *text* and open a gate over the resulting snippets."""
    return start_reveal(segment_transcript(text, char_budget), scroll_limit)


def reveal(state: RevealState) -> RevealState:
    """Show one more snippet, spending one scroll.

    Returns *state* unchanged when the transcript is fully revealed or the
    scroll budget is exhausted.
    """
    if not state.can_reveal:
        return state
    return replace(
        state,
        revealed=state.revealed + 1,
        scrolls_used=state.scrolls_used + 1,
    )
