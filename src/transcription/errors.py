"""Exceptions raised by transcription backends."""

from __future__ import annotations


class TranscriptionError(Exception):
    """A speech-to-text backend could not produce a transcript."""
