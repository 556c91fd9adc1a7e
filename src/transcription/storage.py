"""Supabase storage helpers for transcription records."""

from __future__ import annotations

from typing import Any, cast

from supabase import Client, create_client

from src.config import settings

TABLE = "transcriptions"


def get_supabase_client() -> Client:
    """Create and return a Supabase client from settings."""
    return create_client(settings.supabase_url, settings.supabase_key)


def get_user_client(access_token: str) -> Client:
    """Return a client whose table queries run as the signed-in user.

    PostgREST receives the user's JWT, so row-level security policies apply.
    """
    client = get_supabase_client()
    client.postgrest.auth(access_token)
    return client


def insert_transcription(
    client: Client,
    user_id: str,
    video_url: str,
    full_transcription: str,
) -> dict[str, Any]:
    """Store a transcription and return the inserted row."""
    result = (
        client.table(TABLE)
        .insert(
            {
                "user_id": user_id,
                "video_url": video_url,
                "full_transcription": full_transcription,
            }
        )
        .execute()
    )
    return cast(list[dict[str, Any]], result.data)[0]


def list_transcriptions(client: Client, user_id: str) -> list[dict[str, Any]]:
    """Return the user's transcriptions, newest first."""
    result = (
        client.table(TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .execute()
    )
    return cast(list[dict[str, Any]], result.data or [])


def get_transcription(client: Client, transcription_id: str, user_id: str) -> dict[str, Any] | None:
    """Return one of the user's transcriptions, or None if it is not visible to them."""
    result = (
        client.table(TABLE)
        .select("*")
        .eq("id", transcription_id)
        .eq("user_id", user_id)
        .execute()
    )
    rows = cast(list[dict[str, Any]], result.data)
    return rows[0] if rows else None


def delete_transcription(client: Client, transcription_id: str, user_id: str) -> None:
    """Delete a transcription owned by *user_id*."""
    client.table(TABLE).delete().eq("id", transcription_id).eq("user_id", user_id).execute()
