"""Mock speech-to-text backend used until a real provider is configured."""

from __future__ import annotations

import asyncio

NO_SPEECH_TRANSCRIPT = (
    "Music Soundtrack: [Upbeat electronic music with no discernible spoken content]"
)

_MUSIC_MARKERS = ("music", "song")

_MOCK_TEMPLATE = (
    "This is a mock transcription for the video at {url}. In a real implementation, "
    "this would be the actual transcribed content from the video's audio track. "
    "The transcription would include speaker identification if available, preserve "
    "emojis, and provide a complete word-for-word transcription of all spoken content."
)


async def mock_transcribe(video_url: str, delay_seconds: float = 2.0) -> str:
    """Return canned transcript text for *video_url* after an artificial delay.

    URLs that look like music (contain ``"music"`` or ``"song"``) get the fixed
    no-speech string.
    """
    if delay_seconds > 0:
        await asyncio.sleep(delay_seconds)

    if any(marker in video_url for marker in _MUSIC_MARKERS):
        return NO_SPEECH_TRANSCRIPT

    return _MOCK_TEMPLATE.format(url=video_url)
