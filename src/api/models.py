"""Pydantic request/response schemas for the Mindful Reel Reader API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TranscribeRequest(BaseModel):
    """Request body for the /api/transcribe endpoint.

    Both fields are optional at the schema level so a missing field is
    reported as a 400 by the route rather than a 422 by FastAPI.
    """

    model_config = ConfigDict(populate_by_name=True)

    video_url: str | None = Field(default=None, alias="videoUrl")
    user_id: str | None = Field(default=None, alias="userId")


class Transcription(BaseModel):
    """A stored transcription record."""

    id: str
    user_id: str
    video_url: str
    full_transcription: str
    created_at: str | None = None


class TranscribeResponse(BaseModel):
    """Response body for the /api/transcribe endpoint."""

    success: bool = True
    transcription: Transcription


class TranscriptionListResponse(BaseModel):
    """Response body for GET /api/transcriptions."""

    success: bool = True
    transcriptions: list[Transcription]


class DeleteResponse(BaseModel):
    """Response body for DELETE /api/transcriptions."""

    success: bool = True
    message: str


class SnippetsResponse(BaseModel):
    """A stored transcription split into reading snippets."""

    success: bool = True
    transcription_id: str
    char_budget: int
    snippets: list[str]
