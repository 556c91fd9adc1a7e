"""Dispatch a video URL to the configured speech-to-text backend."""

from __future__ import annotations

import asyncio
import logging

from src.config import settings
from src.reader_config import TranscriptionBackend
from src.transcription.assemblyai_client import transcribe_with_assemblyai
from src.transcription.mock import mock_transcribe

logger = logging.getLogger(__name__)


async def transcribe_video(video_url: str) -> str:
    """Return the transcript text for *video_url*.

    Raises:
        TranscriptionError: The selected backend failed.
    """
    backend = TranscriptionBackend(settings.transcription_backend)
    logger.info("Transcribing %s with %s backend", video_url, backend.value)

    if backend is TranscriptionBackend.ASSEMBLYAI:
        # Synchronous SDK call; keep it off the event loop.
        return await asyncio.to_thread(
            transcribe_with_assemblyai, video_url, settings.assemblyai_api_key
        )

    return await mock_transcribe(video_url, settings.mock_transcription_delay)
