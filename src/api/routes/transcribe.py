"""Transcribe endpoint: turn a video URL into a stored transcript."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from postgrest.exceptions import APIError

from src.api.auth import BearerCredentials, authenticate
from src.api.models import TranscribeRequest, TranscribeResponse, Transcription
from src.transcription.errors import TranscriptionError
from src.transcription.service import transcribe_video
from src.transcription.storage import get_user_client, insert_transcription

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/transcribe", response_model=TranscribeResponse)
async def transcribe(
    request: TranscribeRequest,
    credentials: BearerCredentials,
) -> TranscribeResponse:
    """Transcribe a video and store the result for the signed-in user.

    Field validation runs before authentication so a malformed request never
    reaches the transcription backend or the database.
    """
    if not request.video_url or not request.user_id:
        raise HTTPException(status_code=400, detail="Video URL and user ID are required")

    user = authenticate(credentials)
    if user.id != request.user_id:
        logger.warning("User %s tried to transcribe as %s", user.id, request.user_id)
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        text = await transcribe_video(request.video_url)
    except TranscriptionError as exc:
        logger.error("Transcription failed for %s: %s", request.video_url, exc)
        raise HTTPException(status_code=502, detail="Transcription failed") from exc

    try:
        row = insert_transcription(
            get_user_client(user.access_token),
            user_id=user.id,
            video_url=request.video_url,
            full_transcription=text,
        )
    except APIError:
        logger.exception("Database error while saving transcription for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to save transcription") from None

    logger.info("Stored transcription %s for user %s", row.get("id"), user.id)
    return TranscribeResponse(transcription=Transcription(**row))
