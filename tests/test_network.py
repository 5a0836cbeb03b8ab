"""Tests for RequestsTransport and the dispatcher."""

import json
import os
import sys
from unittest.mock import MagicMock, patch

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telebind.client import Bot
from telebind.exceptions import APIException, NetworkError
from telebind.form import FormBuilder, TransportMode
from telebind.codecs import InputFile
from telebind.network import JsonBody, MultipartBody, RequestsTransport, dispatch, encode_body, fetch

from conftest import TOKEN


def _response(payload: dict, status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.content = json.dumps(payload).encode()
    return resp


# ── RequestsTransport ────────────────────────────────────────────────────────


class TestRequestsTransport:
    """The default transport maps bodies onto requests.post arguments."""

    def test_default_timeout(self) -> None:
        assert RequestsTransport().timeout == 10

    @patch("telebind.network.requests.post")
    def test_json_body(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": True})

        status, raw = RequestsTransport(timeout=3).execute("https://h/botT/getMe", {}, JsonBody(b"{}"))

        assert status == 200
        assert json.loads(raw) == {"ok": True, "result": True}
        kwargs = mock_post.call_args.kwargs
        assert kwargs["data"] == b"{}"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["timeout"] == 3

    @patch("telebind.network.requests.post")
    def test_multipart_body(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": True})
        parts = [("chat_id", (None, "1")), ("photo", ("a.jpg", b"img"))]

        RequestsTransport().execute("https://h/botT/sendPhoto", {}, MultipartBody(parts))

        kwargs = mock_post.call_args.kwargs
        assert kwargs["files"] == parts
        assert "Content-Type" not in kwargs["headers"]

    @patch("telebind.network.requests.post")
    def test_long_poll_extends_timeout(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": []})

        RequestsTransport(timeout=10).execute("https://h/botT/getUpdates", {}, JsonBody(b"{}"), long_poll=30)

        assert mock_post.call_args.kwargs["timeout"] == 40

    @patch("telebind.network.requests.get")
    def test_fetch(self, mock_get: MagicMock) -> None:
        resp = MagicMock()
        resp.status_code = 200
        resp.content = b"bytes"
        mock_get.return_value = resp

        assert RequestsTransport().fetch("https://h/file/botT/a.jpg") == (200, b"bytes")


def test_encode_body_follows_transport_mode() -> None:
    json_form = FormBuilder().add("chat_id", 1).build()
    multipart_form = FormBuilder().add_file("photo", InputFile.memory(b"x", "x.jpg")).build()
    assert isinstance(encode_body(json_form), JsonBody)
    assert isinstance(encode_body(multipart_form), MultipartBody)
    assert multipart_form.mode is TransportMode.MULTIPART


# ── dispatch ─────────────────────────────────────────────────────────────────


class TestDispatch:
    @pytest.mark.asyncio
    async def test_token_goes_into_url(self, bot, transport) -> None:
        transport.queue({"ok": True, "result": 7})
        result = await dispatch(bot, "getFoo", FormBuilder().build(), int)

        assert result == 7
        url, headers, body = transport.calls[0]
        assert url == f"https://api.telegram.org/bot{TOKEN}/getFoo"
        assert isinstance(body, JsonBody)

    @pytest.mark.asyncio
    async def test_exactly_one_exchange_on_api_error(self, bot, transport) -> None:
        transport.queue({"ok": False, "error_code": 429, "description": "Too Many Requests",
                         "parameters": {"retry_after": 1}}, status=429)
        with pytest.raises(APIException):
            await dispatch(bot, "sendMessage", FormBuilder().build(), int)
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_connection_error_is_network_error(self, bot, transport) -> None:
        transport.fail(requests.ConnectionError(f"Max retries exceeded with url: /bot{TOKEN}/getMe"))
        with pytest.raises(NetworkError) as exc_info:
            await dispatch(bot, "getMe", FormBuilder().build(), int)
        assert TOKEN not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(self, bot, transport) -> None:
        transport.fail(requests.Timeout("read timed out"))
        with pytest.raises(NetworkError):
            await dispatch(bot, "getMe", FormBuilder().build(), int)

    @pytest.mark.asyncio
    async def test_os_error_is_network_error(self, bot, transport) -> None:
        transport.fail(OSError("network unreachable"))
        with pytest.raises(NetworkError):
            await dispatch(bot, "getMe", FormBuilder().build(), int)


class TestLongPolling:
    """getUpdates keeps the connection open for its own timeout."""

    @pytest.mark.asyncio
    @patch("telebind.network.requests.post")
    async def test_get_updates_http_timeout_outlasts_poll(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": []})

        updates = await Bot(TOKEN).get_updates().with_timeout(30)

        assert updates == []
        assert mock_post.call_args.kwargs["timeout"] > 30

    @pytest.mark.asyncio
    async def test_ordinary_call_has_no_long_poll(self, bot, transport) -> None:
        transport.queue({"ok": True, "result": []})
        await bot.get_updates()
        transport.queue({"ok": True, "result": True})
        await bot.delete_webhook()
        assert transport.long_polls == [0, 0]

    @pytest.mark.asyncio
    async def test_poll_timeout_passed_to_transport(self, bot, transport) -> None:
        transport.queue({"ok": True, "result": []})
        await bot.get_updates().with_timeout(25)
        assert transport.long_polls == [25]


class TestFetch:
    @pytest.mark.asyncio
    async def test_non_2xx_is_network_error(self, bot, transport) -> None:
        transport.queue(b"not found", status=404)
        with pytest.raises(NetworkError) as exc_info:
            await fetch(bot, bot.file_url("photos/a.jpg"))
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_returns_body(self, bot, transport) -> None:
        transport.queue(b"\x89PNG")
        assert await fetch(bot, bot.file_url("photos/a.jpg")) == b"\x89PNG"


def test_bot_default_transport_is_requests() -> None:
    assert isinstance(Bot(TOKEN).transport, RequestsTransport)
