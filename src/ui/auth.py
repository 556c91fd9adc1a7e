"""Supabase Auth helpers for the Streamlit UI.

Sign-in state lives in ``st.session_state["session"]`` as a small dict with
the user's id, email, and access token.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from src.transcription.storage import get_supabase_client

SESSION_KEY = "session"


def current_session() -> dict[str, Any] | None:
    return st.session_state.get(SESSION_KEY)


def sign_in(email: str, password: str) -> str | None:
    """Sign in with email/password. Returns an error message, or None on success."""
    try:
        response = get_supabase_client().auth.sign_in_with_password(
            {"email": email, "password": password}
        )
    except Exception as exc:
        return str(exc)

    if response.session is None or response.user is None:
        return "Sign in failed"

    st.session_state[SESSION_KEY] = {
        "user_id": str(response.user.id),
        "email": response.user.email,
        "access_token": response.session.access_token,
    }
    return None


def sign_up(email: str, password: str) -> str | None:
    """Create an account; Supabase emails a confirmation link. Returns an error message, or None."""
    try:
        get_supabase_client().auth.sign_up({"email": email, "password": password})
    except Exception as exc:
        return str(exc)
    return None


def sign_out() -> None:
    st.session_state.pop(SESSION_KEY, None)
    st.session_state.pop("reader", None)
