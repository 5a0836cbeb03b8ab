"""Tests for the response envelope decoder."""

import json
import os
import sys
from typing import List

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telebind.envelope import ResponseEnvelope, decode_response
from telebind.exceptions import APIException, DecodeError, NetworkError, ValueOutOfRange
from telebind.types import ForumTopic, Message, TrueResult, User
from telebind.codecs import Rgb


def _raw(payload: dict) -> bytes:
    return json.dumps(payload).encode()


class TestSuccess:
    def test_integer_result(self) -> None:
        assert decode_response(200, b'{"ok":true,"result":42}', int) == 42

    def test_model_result(self) -> None:
        user = decode_response(200, _raw({"ok": True, "result": {"id": 1, "is_bot": True, "first_name": "Bot"}}), User)
        assert user == User(id=1, is_bot=True, first_name="Bot")

    def test_list_result(self) -> None:
        raw = _raw({"ok": True, "result": [
            {"message_id": 1, "date": 0, "chat": {"id": 5, "type": "private"}},
            {"message_id": 2, "date": 0, "chat": {"id": 5, "type": "private"}},
        ]})
        messages = decode_response(200, raw, List[Message])
        assert [m.message_id for m in messages] == [1, 2]

    def test_true_result(self) -> None:
        assert decode_response(200, b'{"ok":true,"result":true}', TrueResult) is True

    def test_rgb_inside_result(self) -> None:
        raw = _raw({"ok": True, "result": {"message_thread_id": 3, "name": "t", "icon_color": 0x6FB9F0}})
        topic = decode_response(200, raw, ForumTopic)
        assert topic.icon_color == Rgb(0x6F, 0xB9, 0xF0)


class TestApiErrors:
    def test_rate_limit_surfaces_retry_after(self) -> None:
        raw = b'{"ok":false,"error_code":429,"description":"Too Many Requests","parameters":{"retry_after":5}}'
        with pytest.raises(APIException) as exc_info:
            decode_response(429, raw, int)
        exc = exc_info.value
        assert exc.error_code == 429
        assert exc.retry_after == 5
        assert exc.migrate_to_chat_id is None
        assert exc.status_code == 429
        assert "Too Many Requests" in str(exc)

    def test_migration_surfaces_new_chat_id(self) -> None:
        raw = _raw({
            "ok": False,
            "error_code": 400,
            "description": "Bad Request: group chat was upgraded to a supergroup chat",
            "parameters": {"migrate_to_chat_id": -1001234567890},
        })
        with pytest.raises(APIException) as exc_info:
            decode_response(400, raw, Message)
        assert exc_info.value.migrate_to_chat_id == -1001234567890
        assert exc_info.value.retry_after is None

    def test_api_error_with_2xx_status(self) -> None:
        raw = _raw({"ok": False, "error_code": 403, "description": "Forbidden"})
        with pytest.raises(APIException) as exc_info:
            decode_response(200, raw, int)
        assert exc_info.value.response_body["description"] == "Forbidden"


class TestMalformed:
    def test_result_type_mismatch_is_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(200, b'{"ok":true,"result":"not a user"}', User)

    def test_out_of_range_colour_is_the_cause(self) -> None:
        raw = _raw({"ok": True, "result": {"message_thread_id": 3, "name": "t", "icon_color": 2**40}})
        with pytest.raises(DecodeError) as exc_info:
            decode_response(200, raw, ForumTopic)
        assert isinstance(exc_info.value.__cause__, ValueOutOfRange)

    def test_plain_mismatch_keeps_validation_error(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_response(200, b'{"ok":true,"result":"x"}', int)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_decode_error_is_not_api_exception(self) -> None:
        assert not issubclass(DecodeError, APIException)

    def test_non_2xx_garbage_is_network_error(self) -> None:
        with pytest.raises(NetworkError) as exc_info:
            decode_response(502, b"<html>Bad Gateway</html>", int)
        assert exc_info.value.status_code == 502

    def test_non_2xx_empty_body_is_network_error(self) -> None:
        with pytest.raises(NetworkError):
            decode_response(504, b"", int)

    def test_2xx_garbage_is_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(200, b"not json", int)

    def test_success_without_result_violates_frame(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(200, b'{"ok":true}', int)

    def test_failure_without_description_violates_frame(self) -> None:
        with pytest.raises(NetworkError):
            decode_response(500, b'{"ok":false}', int)


class TestResponseEnvelopeModel:
    def test_parameters_default_to_none(self) -> None:
        env = ResponseEnvelope.model_validate({"ok": False, "error_code": 400, "description": "Bad Request"})
        assert env.parameters is None

    def test_null_result_is_allowed(self) -> None:
        env = ResponseEnvelope.model_validate({"ok": True, "result": None})
        assert env.ok is True
        assert env.result is None
