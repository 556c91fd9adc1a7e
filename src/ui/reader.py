"""Framework-free helpers behind the Streamlit reader view."""

from __future__ import annotations

from datetime import datetime

import httpx

from src.snippets.reveal import RevealState

END_OF_TRANSCRIPT = (
    "You've reached the end of the transcription!",
    "Great job practicing mindful consumption.",
)
SCROLL_LIMIT_REACHED = (
    "You've reached your scroll limit!",
    "Take a break or start a new transcription to continue.",
)


def is_valid_url(url: str) -> bool:
    """Accept absolute http(s) URLs with a host."""
    try:
        parsed = httpx.URL(url.strip())
    except (httpx.InvalidURL, TypeError):
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.host)


def truncate_text(text: str, max_length: int = 150) -> str:
    """History preview: the first *max_length* characters plus an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_date(value: str | None) -> str:
    """Render a Supabase timestamp as e.g. ``Oct 19, 2026, 12:00 PM``.

    Unparseable values are shown as-is.
    """
    if not value:
        return "N/A"
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        return value
    return f"{dt:%b} {dt.day}, {dt.year}, {dt:%I:%M %p}"


def end_notice(state: RevealState) -> tuple[str, str] | None:
    """Headline and subtext for a terminal reader state, or None while reading.

    Reaching the end takes priority over running out of scrolls.
    """
    if not state.has_more:
        return END_OF_TRANSCRIPT
    if state.limit_reached:
        return SCROLL_LIMIT_REACHED
    return None


def counters_line(state: RevealState) -> str:
    return (
        f"Scrolls remaining: {state.remaining_scrolls} · "
        f"Snippets: {len(state.visible)} / {state.total}"
    )
