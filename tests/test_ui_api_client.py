"""Tests for the UI's HTTP client: API errors must reach the user verbatim."""

from __future__ import annotations

from unittest.mock import patch

import httpx

from src.ui.api_client import _error_message, delete_transcription, transcribe

API = "http://api.test"


def _response(method: str, path: str, status: int, **kwargs: object) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request(method, f"{API}{path}"), **kwargs)  # type: ignore[arg-type]


def _status_error(response: httpx.Response) -> httpx.HTTPStatusError:
    return httpx.HTTPStatusError("failed", request=response.request, response=response)


class TestErrorMessage:
    def test_uses_api_error_body(self) -> None:
        response = _response(
            "POST", "/api/transcribe", 400, json={"error": "Video URL and user ID are required"}
        )
        assert _error_message(_status_error(response)) == "Video URL and user ID are required"

    def test_non_json_body_falls_back_to_exception_text(self) -> None:
        response = _response("POST", "/api/transcribe", 502, text="<html>Bad Gateway</html>")
        assert _error_message(_status_error(response)) == "failed"

    def test_transport_error_uses_exception_text(self) -> None:
        assert _error_message(httpx.ConnectError("connection refused")) == "connection refused"


class TestTranscribe:
    def test_returns_record(self) -> None:
        record = {"id": "t1", "full_transcription": "words"}
        response = _response(
            "POST", "/api/transcribe", 200, json={"success": True, "transcription": record}
        )
        with patch("src.ui.api_client.httpx.post", return_value=response) as mock_post:
            assert transcribe("https://v", "u1", "jwt") == record

        _, kwargs = mock_post.call_args
        assert kwargs["json"] == {"videoUrl": "https://v", "userId": "u1"}
        assert kwargs["headers"] == {"Authorization": "Bearer jwt"}

    def test_error_is_shown_to_user(self) -> None:
        response = _response("POST", "/api/transcribe", 401, json={"error": "Unauthorized"})
        with (
            patch("src.ui.api_client.httpx.post", return_value=response),
            patch("src.ui.api_client.st") as mock_st,
        ):
            assert transcribe("https://v", "u1", "jwt") == {}

        mock_st.error.assert_called_once_with("Error: Unauthorized")


def test_delete_failure_is_shown_to_user() -> None:
    response = _response("DELETE", "/api/transcriptions", 401, json={"error": "Unauthorized"})
    with (
        patch("src.ui.api_client.httpx.delete", return_value=response),
        patch("src.ui.api_client.st") as mock_st,
    ):
        assert delete_transcription("t1", "jwt") is False

    mock_st.error.assert_called_once_with("Failed to delete transcription: Unauthorized")
