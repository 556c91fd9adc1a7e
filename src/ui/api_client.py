"""HTTP client wrapper for the Mindful Reel Reader FastAPI backend."""

from __future__ import annotations

import httpx
import streamlit as st

from src.config import settings

API_URL = settings.api_url


def _auth_headers(access_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


def _error_message(exc: httpx.HTTPError) -> str:
    """Prefer the API's ``{"error": ...}`` body over the raw status line."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            return str(exc.response.json().get("error", exc))
        except ValueError:
            pass
    return str(exc)


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.ConnectError:
        return False


def transcribe(video_url: str, user_id: str, access_token: str) -> dict:  # type: ignore[type-arg]
    """Submit a video URL for transcription; returns the stored record or {}."""
    try:
        r = httpx.post(
            f"{API_URL}/api/transcribe",
            json={"videoUrl": video_url, "userId": user_id},
            headers=_auth_headers(access_token),
            timeout=120.0,
        )
        r.raise_for_status()
        return r.json().get("transcription", {})  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Error: {_error_message(e)}")
        return {}


def get_transcriptions(access_token: str) -> list[dict]:  # type: ignore[type-arg]
    """Fetch the signed-in user's transcriptions, newest first."""
    try:
        r = httpx.get(
            f"{API_URL}/api/transcriptions",
            headers=_auth_headers(access_token),
            timeout=10.0,
        )
        r.raise_for_status()
        return r.json().get("transcriptions", [])  # type: ignore[no-any-return]
    except httpx.HTTPError:
        return []


def delete_transcription(transcription_id: str, access_token: str) -> bool:
    """Delete a transcription; returns True on success."""
    try:
        r = httpx.delete(
            f"{API_URL}/api/transcriptions",
            params={"id": transcription_id},
            headers=_auth_headers(access_token),
            timeout=10.0,
        )
        r.raise_for_status()
        return bool(r.json().get("success"))
    except httpx.HTTPError as e:
        st.error(f"Failed to delete transcription: {_error_message(e)}")
        return False
