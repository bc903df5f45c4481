"""Unit tests for the session and redirect helpers."""

import pytest
from fastapi import HTTPException, Response
from starlette.requests import Request

from ranker.config import Settings
from ranker.interface.api.routes.votes import _redirect_back
from ranker.interface.api.session import (
    clear_session_cookie,
    require_uuid,
    session_token,
    set_session_cookie,
)


def _request(headers: dict[str, str] | None = None) -> Request:
    raw_headers = [
        (name.lower().encode(), value.encode())
        for name, value in {"host": "ranker.test", **(headers or {})}.items()
    ]
    return Request(
        {
            "type": "http",
            "method": "POST",
            "scheme": "http",
            "server": ("ranker.test", 80),
            "path": "/works/x/upvote",
            "query_string": b"",
            "headers": raw_headers,
        }
    )


class TestRedirectBack:
    """Where an upvote sends the browser."""

    def test_without_referer_uses_fallback(self):
        assert _redirect_back(_request(), "/works/1") == "/works/1"

    def test_same_host_referer_keeps_path_and_query(self):
        request = _request({"referer": "http://ranker.test/works?category=book"})

        assert _redirect_back(request, "/works/1") == "/works?category=book"

    def test_relative_referer_is_used(self):
        assert _redirect_back(_request({"referer": "/users"}), "/works/1") == "/users"

    def test_foreign_referer_uses_fallback(self):
        request = _request({"referer": "https://evil.example/phish"})

        assert _redirect_back(request, "/works/1") == "/works/1"


class TestSessionCookie:
    """Setting, reading and clearing the session cookie."""

    def test_set_cookie_is_http_only(self):
        settings = Settings()
        response = Response()

        set_session_cookie(response, "token-123", settings)

        header = response.headers["set-cookie"]
        assert header.startswith(f"{settings.auth.cookie_name}=token-123")
        assert "HttpOnly" in header
        assert "samesite=lax" in header.lower()

    def test_clear_cookie_expires_it(self):
        settings = Settings()
        response = Response()

        clear_session_cookie(response, settings)

        header = response.headers["set-cookie"]
        assert header.startswith(f'{settings.auth.cookie_name}=""')
        assert "Max-Age=0" in header

    def test_session_token_reads_cookie(self):
        settings = Settings()
        request = _request({"cookie": f"{settings.auth.cookie_name}=abc"})

        assert session_token(request, settings) == "abc"
        assert session_token(_request(), settings) is None


class TestRequireUuid:
    """Path id normalization."""

    def test_normalizes_uuid(self):
        raw = "1B4E28BA-2FA1-11D2-883F-0016D3CCA427"

        assert require_uuid(raw, "Work") == raw.lower()

    @pytest.mark.parametrize("raw", ["42", "not-a-uuid", ""])
    def test_malformed_id_is_404(self, raw):
        with pytest.raises(HTTPException) as exc_info:
            require_uuid(raw, "Work")

        assert exc_info.value.status_code == 404
