"""Tests for wren.http.request and wren.http.session."""

import pytest

from wren.errors import SessionNotStarted
from wren.http.request import Request
from wren.http.session import SessionStore


class TestSessionStore:
    def test_not_started_by_default(self) -> None:
        store = SessionStore()
        assert store.is_started is False
        assert store.data is None

    def test_start_is_idempotent(self) -> None:
        store = SessionStore()
        data = store.start()
        data["a"] = 1
        assert store.start() is data
        assert store.data == {"a": 1}

    def test_existing_data(self) -> None:
        data = {"user": "ana"}
        store = SessionStore(data)
        assert store.is_started is True
        assert store.data is data

    def test_clear(self) -> None:
        store = SessionStore({"a": 1})
        store.clear()
        assert store.is_started is False


class TestRequestCopies:
    def test_fields_are_copied(self) -> None:
        query = {"page": "2"}
        request = Request(query=query, cookies={"sid": "x"})
        query["page"] = "3"
        assert request.query == {"page": "2"}

    def test_changes_do_not_write_back(self) -> None:
        server = {"PATH_INFO": "/"}
        request = Request(server=server)
        request.server["PATH_INFO"] = "/changed"
        assert server["PATH_INFO"] == "/"

    def test_defaults(self) -> None:
        request = Request()
        assert request.cookies == {}
        assert request.env == {}
        assert request.files == {}
        assert request.form == {}
        assert request.params == {}
        assert request.path == "/"
        assert request.method == "GET"


class TestRequestSession:
    def test_no_store(self) -> None:
        request = Request()
        assert request.has_session() is False
        with pytest.raises(SessionNotStarted):
            _ = request.session

    def test_store_not_started(self) -> None:
        request = Request(session_store=SessionStore())
        assert request.has_session() is False
        with pytest.raises(LookupError, match="not been started"):
            _ = request.session

    def test_session_is_shared_both_ways(self) -> None:
        store = SessionStore()
        request = Request(session_store=store)
        store.start()["user_id"] = 42
        assert request.session["user_id"] == 42

        request.session["cart"] = ["apple"]
        assert store.data is not None
        assert store.data["cart"] == ["apple"]
        assert request.session is store.data

    def test_clear_session_clears_store(self) -> None:
        store = SessionStore({"user_id": 42})
        request = Request(session_store=store)
        assert request.has_session() is True
        request.clear_session()
        assert request.has_session() is False
        assert store.is_started is False
        with pytest.raises(SessionNotStarted):
            _ = request.session

    def test_restarted_store_visible(self) -> None:
        store = SessionStore({"old": True})
        request = Request(session_store=store)
        request.clear_session()
        store.start()["new"] = True
        assert request.session == {"new": True}

    def test_clear_without_store_is_noop(self) -> None:
        Request().clear_session()


class TestFromAsgi:
    def _scope(self) -> dict:
        return {
            "type": "http",
            "method": "POST",
            "path": "/front.php/login",
            "query_string": b"next=%2Fhome",
            "http_version": "1.1",
            "headers": [
                (b"host", b"example.com"),
                (b"cookie", b"sid=abc; theme=dark%20blue"),
                (b"user-agent", b"pytest"),
            ],
            "server": ("example.com", 8000),
            "client": ("10.0.0.1", 50000),
        }

    def test_path_and_method(self) -> None:
        request = Request.from_asgi(self._scope(), env={})
        assert request.path == "/front.php/login"
        assert request.method == "POST"

    def test_server_variables(self) -> None:
        server = Request.from_asgi(self._scope(), env={}).server
        assert server["REQUEST_METHOD"] == "POST"
        assert server["PATH_INFO"] == "/front.php/login"
        assert server["QUERY_STRING"] == "next=%2Fhome"
        assert server["REQUEST_URI"] == "/front.php/login?next=%2Fhome"
        assert server["SERVER_PROTOCOL"] == "HTTP/1.1"
        assert server["SERVER_NAME"] == "example.com"
        assert server["SERVER_PORT"] == 8000
        assert server["REMOTE_ADDR"] == "10.0.0.1"
        assert server["HTTP_HOST"] == "example.com"
        assert server["HTTP_USER_AGENT"] == "pytest"

    def test_cookies_parsed(self) -> None:
        request = Request.from_asgi(self._scope(), env={})
        assert request.cookies == {"sid": "abc", "theme": "dark blue"}

    def test_query_not_parsed(self) -> None:
        assert Request.from_asgi(self._scope(), env={}).query == {}

    def test_env_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WREN_TEST_VAR", "1")
        request = Request.from_asgi(self._scope())
        assert request.env["WREN_TEST_VAR"] == "1"

    def test_session_store_attached(self) -> None:
        store = SessionStore({"a": 1})
        request = Request.from_asgi(self._scope(), session_store=store, env={})
        assert request.session == {"a": 1}

    def test_minimal_scope(self) -> None:
        request = Request.from_asgi({"type": "http", "path": "/"}, env={})
        assert request.server["REQUEST_URI"] == "/"
        assert request.cookies == {}
