"""AssemblyAI speech-to-text backend for public video URLs."""

from __future__ import annotations

from src.transcription.errors import TranscriptionError


def transcribe_with_assemblyai(video_url: str, api_key: str) -> str:
    """Transcribe the audio track at *video_url* via the AssemblyAI SDK.

    The SDK uploads nothing when given a URL: AssemblyAI fetches the media
    itself, and ``transcribe`` blocks while it polls for completion.

    Raises:
        TranscriptionError: Missing key, rejected media, or provider failure.
    """
    if not api_key:
        raise TranscriptionError("AssemblyAI API key is not configured")

    import assemblyai as aai  # type: ignore[import-untyped]  # no stubs; import inside function

    aai.settings.api_key = api_key
    transcriber = aai.Transcriber()
    config = aai.TranscriptionConfig(punctuate=True, format_text=True)

    try:
        transcript = transcriber.transcribe(video_url, config=config)
    except Exception as exc:
        raise TranscriptionError(f"Transcription service unavailable: {exc}") from exc

    if transcript.status == aai.TranscriptStatus.error:
        raise TranscriptionError(f"Transcription failed: {transcript.error}")

    return transcript.text or ""
