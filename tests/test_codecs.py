"""Tests for the Rgb, ChatId and InputFile wire codecs."""

import os
import sys
from typing import Optional, Union

import pytest
from pydantic import BaseModel, ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telebind.codecs import (
    ChatId,
    InputFile,
    InputFileKind,
    Rgb,
    decode_chat_id,
    decode_rgb,
    encode_chat_id,
)
from telebind.exceptions import ValueOutOfRange


class _Colored(BaseModel):
    color: Rgb


class _Target(BaseModel):
    chat_id: ChatId
    fallback: Optional[ChatId] = None


# ── Rgb ──────────────────────────────────────────────────────────────────────


class TestRgb:
    """Packed 0xRRGGBB colour codec."""

    def test_to_u32_is_big_endian(self) -> None:
        assert Rgb(0xAA, 0xBB, 0xCC).to_u32() == 0xAABBCC

    def test_from_u32(self) -> None:
        assert Rgb.from_u32(0xAABBCC) == Rgb(0xAA, 0xBB, 0xCC)

    @pytest.mark.parametrize(
        "color",
        [Rgb(0, 0, 0), Rgb(0xFF, 0xFF, 0xFF), Rgb(0x6F, 0xB9, 0xF0), Rgb(1, 0, 0xFE)],
    )
    def test_round_trip(self, color: Rgb) -> None:
        assert Rgb.from_u32(color.to_u32()) == color

    def test_top_byte_is_ignored(self) -> None:
        assert Rgb.from_u32(0xFFFFFFFF) == Rgb(0xFF, 0xFF, 0xFF)
        assert Rgb.from_u32(0x12AABBCC) == Rgb(0xAA, 0xBB, 0xCC)

    def test_value_wider_than_u32_rejected(self) -> None:
        with pytest.raises(ValueOutOfRange):
            Rgb.from_u32(0xFFFFFFFF + 1)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueOutOfRange):
            Rgb.from_u32(-1)

    def test_channel_must_fit_a_byte(self) -> None:
        with pytest.raises(ValueOutOfRange):
            Rgb(256, 0, 0)

    @pytest.mark.parametrize("channel", [True, 1.0, "1", None])
    def test_channel_must_be_an_int(self, channel) -> None:
        with pytest.raises(TypeError):
            Rgb(channel, 0, 0)

    def test_decode_rejects_non_integers(self) -> None:
        with pytest.raises(ValueError):
            decode_rgb("0xAABBCC")
        with pytest.raises(ValueError):
            decode_rgb(True)


class TestRgbInModels:
    """The colour travels as a plain integer inside JSON objects."""

    def test_decode_from_json(self) -> None:
        model = _Colored.model_validate_json('{"color": 11189196}')
        assert model.color == Rgb(r=0xAA, g=0xBB, b=0xCC)

    def test_encode_back_to_literal_integer(self) -> None:
        model = _Colored(color=Rgb(0xAA, 0xBB, 0xCC))
        assert model.model_dump(mode="json") == {"color": 11189196}
        assert model.model_dump_json() == '{"color":11189196}'

    def test_overflow_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            _Colored.model_validate({"color": 2**40})


# ── ChatId ───────────────────────────────────────────────────────────────────


class TestChatId:
    """The chat id union keeps whichever variant it was given."""

    def test_numeric_passes_through(self) -> None:
        assert encode_chat_id(-1001234567890) == -1001234567890

    def test_username_passes_through(self) -> None:
        assert encode_chat_id("@channel") == "@channel"

    def test_numeric_string_stays_a_string(self) -> None:
        decoded = decode_chat_id("123")
        assert decoded == "123"
        assert isinstance(decoded, str)

    def test_integer_stays_an_integer(self) -> None:
        decoded = decode_chat_id(123)
        assert isinstance(decoded, int)

    def test_model_field_preserves_variant(self) -> None:
        target = _Target(chat_id="42", fallback=42)
        assert target.chat_id == "42"
        assert target.fallback == 42

    @pytest.mark.parametrize("raw", [True, 2**63, "", 1.5, None])
    def test_invalid_values_rejected(self, raw: Union[bool, int, str, float, None]) -> None:
        with pytest.raises(ValidationError):
            decode_chat_id(raw)


# ── InputFile ────────────────────────────────────────────────────────────────


class TestInputFile:
    """File references: only inline bytes need an upload."""

    def test_memory_needs_upload(self) -> None:
        f = InputFile.memory(b"\x89PNG", "cat.png")
        assert f.kind is InputFileKind.MEMORY
        assert f.needs_upload
        assert f.filename == "cat.png"

    def test_file_id_and_url_encode_as_strings(self) -> None:
        assert InputFile.file_id("AgAD123").to_wire() == "AgAD123"
        assert InputFile.url("https://example.com/cat.png").to_wire() == "https://example.com/cat.png"
        assert not InputFile.url("https://example.com/cat.png").needs_upload

    def test_memory_has_no_string_form(self) -> None:
        with pytest.raises(ValueError):
            InputFile.memory(b"data").to_wire()

    def test_from_path_reads_bytes(self, tmp_path) -> None:
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF-1.7")
        f = InputFile.from_path(path)
        assert f.needs_upload
        assert f.value == b"%PDF-1.7"
        assert f.filename == "report.pdf"

    def test_repr_hides_content(self) -> None:
        assert "secret" not in repr(InputFile.memory(b"secret", "a.bin"))
