"""Split transcripts into tweet-sized reading snippets."""

from __future__ import annotations

from src.reader_config import DEFAULT_READER_CONFIG


def segment_transcript(
    text: str,
    char_budget: int = DEFAULT_READER_CONFIG.char_budget,
) -> list[str]:
    """Greedily pack whitespace-delimited words into snippets of at most *char_budget* chars.

    Words are joined with single spaces. A word that does not fit after the
    current buffer closes that buffer and starts the next snippet. A single
    word longer than the budget becomes its own oversized snippet rather than
    being split.

    Length is measured in code points (``len``), not grapheme clusters.

    Args:
        text: Raw transcript text. Any run of whitespace separates words.
        char_budget: Maximum snippet length in characters.

    Returns:
        Snippets in transcript order. Empty or whitespace-only input yields ``[]``.

    Raises:
        ValueError: If *char_budget* is not positive.
    """
    if char_budget <= 0:
        raise ValueError(f"char_budget must be positive, got {char_budget}")

    snippets: list[str] = []
    current = ""

    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= char_budget:
            current = f"{current} {word}"
        else:
            snippets.append(current)
            current = word

    if current:
        snippets.append(current)

    return snippets
