"""Mindful Reel Reader -- Streamlit UI.

Multi-page application for transcribing short videos, reading them as
scroll-limited snippets, and managing transcription history.
"""

from __future__ import annotations

import streamlit as st

from src.config import settings
from src.reader_config import DEFAULT_READER_CONFIG
from src.snippets.reveal import reveal, start_reveal_for_transcript
from src.ui.api_client import (
    check_health,
    delete_transcription,
    get_transcriptions,
    transcribe,
)
from src.ui.auth import current_session, sign_in, sign_out, sign_up
from src.ui.reader import (
    counters_line,
    end_notice,
    format_date,
    is_valid_url,
    truncate_text,
)

READER_KEY = "reader"
PENDING_DELETE_KEY = "pending_delete"

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Mindful Reel Reader", layout="centered")

session = current_session()

# ---------------------------------------------------------------------------
# Sidebar -- navigation + account + API status
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("Mindful Reel Reader")
    st.markdown("---")

    page = st.radio(
        "Navigate",
        ["Transcribe", "History", "Account"],
        label_visibility="collapsed",
    )

    st.markdown("---")
    if session:
        st.write(f"Signed in as **{session.get('email') or session['user_id']}**")
        if st.button("Sign out"):
            sign_out()
            st.rerun()
    else:
        st.write("Not signed in")

    st.markdown("---")

    # API connection indicator
    api_healthy = check_health()
    if api_healthy:
        st.markdown(":green_circle: API connected")
    else:
        st.markdown(":red_circle: API unreachable")

# ---------------------------------------------------------------------------
# Page: Transcribe (input form, then the gated reader)
# ---------------------------------------------------------------------------
if page == "Transcribe":
    if not session:
        st.header("Mindful Reel Reader")
        st.write(
            "Break free from endless scrolling. Paste a short video link, set a "
            "scroll limit, and read the transcript one snippet at a time."
        )
        st.info("Please sign in on the Account page to use the transcription service.")

    elif READER_KEY not in st.session_state:
        st.header("Transcribe Your Video")

        video_url = st.text_input(
            "Video URL",
            placeholder="https://www.instagram.com/reel/... or https://youtube.com/shorts/...",
            help="Paste a public video URL from Instagram, YouTube, or other platforms",
        )
        scroll_limit = st.slider(
            "Scroll limit",
            min_value=DEFAULT_READER_CONFIG.min_scroll_limit,
            max_value=DEFAULT_READER_CONFIG.max_scroll_limit,
            value=DEFAULT_READER_CONFIG.clamp_scroll_limit(settings.default_scroll_limit),
            help="Set a limit to promote mindful consumption",
        )
        consent = st.checkbox(
            "I consent to the transcription and processing of the video content I provide. "
            "Only transcriptions and metadata are stored, not the original video."
        )

        if st.button("Start Transcription", disabled=not consent or not is_valid_url(video_url)):
            if not api_healthy:
                st.error("Cannot transcribe: the API server is not reachable.")
            else:
                with st.spinner("Transcribing..."):
                    record = transcribe(video_url.strip(), session["user_id"], session["access_token"])
                if record:
                    st.session_state[READER_KEY] = {
                        "video_url": video_url.strip(),
                        "state": start_reveal_for_transcript(
                            record.get("full_transcription", ""),
                            scroll_limit,
                            settings.snippet_char_budget,
                        ),
                    }
                    st.rerun()
                # Error case is already handled inside transcribe via st.error

    else:
        reader = st.session_state[READER_KEY]
        state = reader["state"]

        header_col, reset_col = st.columns([4, 1])
        header_col.header("Transcription")
        if reset_col.button("New Transcription"):
            del st.session_state[READER_KEY]
            st.rerun()

        st.caption(counters_line(state))
        st.progress(state.progress)

        for i, snippet in enumerate(state.visible, 1):
            with st.container(border=True):
                st.write(snippet)
                st.caption(f"Snippet {i}")

        col_next, col_share, col_orig = st.columns(3)
        if state.can_reveal:
            if col_next.button(f"Next Snippet ({state.remaining_scrolls} scrolls left)"):
                reader["state"] = reveal(state)
                st.rerun()
        col_share.download_button(
            "Share",
            data=state.share_text(),
            file_name="transcription.txt",
            mime="text/plain",
        )
        col_orig.link_button("View Original", reader["video_url"])

        notice = end_notice(state)
        if notice is not None:
            headline, subtext = notice
            if state.has_more:
                st.warning(f"**{headline}** {subtext}")
            else:
                st.success(f"**{headline}** {subtext}")

# ---------------------------------------------------------------------------
# Page: History
# ---------------------------------------------------------------------------
elif page == "History":
    st.header("Transcription History")

    if not session:
        st.info("Sign in to see your transcriptions.")
    elif not api_healthy:
        st.warning("The API server is not reachable. Cannot load history.")
    else:
        records = get_transcriptions(session["access_token"])
        if not records:
            st.info("No transcriptions yet. Transcribe a video to get started.")
        for record in records:
            record_id = record["id"]
            with st.expander(
                f"{record.get('video_url', '')} -- {format_date(record.get('created_at'))}"
            ):
                st.write(truncate_text(record.get("full_transcription", "")))
                st.link_button("View Original", record.get("video_url", ""))

                # Two-step delete: the first click only arms the confirmation.
                if st.session_state.get(PENDING_DELETE_KEY) != record_id:
                    if st.button("Delete", key=f"delete-{record_id}"):
                        st.session_state[PENDING_DELETE_KEY] = record_id
                        st.rerun()
                else:
                    st.warning("Are you sure you want to delete this transcription?")
                    confirm_col, cancel_col = st.columns(2)
                    if confirm_col.button("Yes, delete", key=f"confirm-delete-{record_id}"):
                        st.session_state.pop(PENDING_DELETE_KEY, None)
                        if delete_transcription(record_id, session["access_token"]):
                            st.success("Transcription deleted.")
                            st.rerun()
                    if cancel_col.button("Cancel", key=f"cancel-delete-{record_id}"):
                        st.session_state.pop(PENDING_DELETE_KEY, None)
                        st.rerun()

# ---------------------------------------------------------------------------
# Page: Account
# ---------------------------------------------------------------------------
elif page == "Account":
    st.header("Account")

    if session:
        st.write(f"You are signed in as **{session.get('email') or session['user_id']}**.")
    else:
        mode = st.radio("Mode", ["Sign In", "Sign Up"], horizontal=True)
        email = st.text_input("Email", placeholder="your@email.com")
        password = st.text_input("Password", type="password")

        if st.button(mode, disabled=not email or not password):
            if mode == "Sign In":
                error = sign_in(email, password)
                if error:
                    st.error(error)
                else:
                    st.rerun()
            else:
                error = sign_up(email, password)
                if error:
                    st.error(error)
                else:
                    st.success("Check your email for the confirmation link!")
