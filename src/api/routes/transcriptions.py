"""Transcription history endpoints: list, delete, and snippet views."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query
from postgrest.exceptions import APIError

from src.api.auth import BearerCredentials, CurrentUser, authenticate
from src.api.models import (
    DeleteResponse,
    SnippetsResponse,
    Transcription,
    TranscriptionListResponse,
)
from src.config import settings
from src.snippets.segmenter import segment_transcript
from src.transcription.storage import (
    delete_transcription,
    get_transcription,
    get_user_client,
    list_transcriptions,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/transcriptions", response_model=TranscriptionListResponse)
async def list_user_transcriptions(user: CurrentUser) -> TranscriptionListResponse:
    """List the caller's transcriptions ordered by creation date (newest first)."""
    try:
        rows = list_transcriptions(get_user_client(user.access_token), user.id)
    except APIError:
        logger.exception("Database error while listing transcriptions for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to fetch transcriptions") from None

    return TranscriptionListResponse(transcriptions=[Transcription(**r) for r in rows])


@router.delete("/api/transcriptions", response_model=DeleteResponse)
async def delete_user_transcription(
    credentials: BearerCredentials,
    transcription_id: Annotated[str | None, Query(alias="id")] = None,
) -> DeleteResponse:
    """Delete one of the caller's transcriptions.

    The query filters on the caller's id; RLS on the table enforces the same
    ownership rule server-side.
    """
    if not transcription_id:
        raise HTTPException(status_code=400, detail="Transcription ID is required")

    user = authenticate(credentials)

    try:
        delete_transcription(get_user_client(user.access_token), transcription_id, user.id)
    except APIError:
        logger.exception("Delete error for transcription %s", transcription_id)
        raise HTTPException(status_code=500, detail="Failed to delete transcription") from None

    logger.info("Deleted transcription %s for user %s", transcription_id, user.id)
    return DeleteResponse(message="Transcription deleted successfully")


@router.get("/api/transcriptions/{transcription_id}/snippets", response_model=SnippetsResponse)
async def get_transcription_snippets(transcription_id: str, user: CurrentUser) -> SnippetsResponse:
    """Split one of the caller's stored transcripts into reading snippets."""
    try:
        row = get_transcription(get_user_client(user.access_token), transcription_id, user.id)
    except APIError:
        logger.exception("Database error while loading transcription %s", transcription_id)
        raise HTTPException(status_code=500, detail="Failed to fetch transcription") from None

    if row is None:
        raise HTTPException(status_code=404, detail="Transcription not found")

    budget = settings.snippet_char_budget
    return SnippetsResponse(
        transcription_id=transcription_id,
        char_budget=budget,
        snippets=segment_transcript(row.get("full_transcription") or "", budget),
    )
