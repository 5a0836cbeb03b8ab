"""Wire codecs for values that do not map 1:1 onto JSON primitives.

Each codec is a pair of plain functions registered with pydantic through
``__get_pydantic_core_schema__`` (or a :class:`~pydantic.TypeAdapter`), so
the same logic is used by model validation, by the form encoder and by
callers working with raw values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Optional, Union

from pydantic import Field, GetCoreSchemaHandler, Strict, TypeAdapter
from pydantic_core import core_schema

from telebind.exceptions import ValueOutOfRange

_U32_MAX = 0xFFFFFFFF
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


# ── Packed colour ────────────────────────────────────────────────────────────


@dataclass(frozen=True, order=True)
class Rgb:
    """RGB colour, sent over the wire as a big-endian ``0xRRGGBB`` integer."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError(f"colour channel must be an int, got {type(channel).__name__}")
            if not 0 <= channel <= 0xFF:
                raise ValueOutOfRange(f"colour channel {channel!r} doesn't fit a byte")

    def to_u32(self) -> int:
        """Pack into ``0x00RRGGBB``.

        >>> Rgb(0xAA, 0xBB, 0xCC).to_u32() == 0xAABBCC
        True
        """
        return int.from_bytes(bytes((0, self.r, self.g, self.b)), "big")

    @classmethod
    def from_u32(cls, value: int) -> "Rgb":
        """Unpack a 32-bit integer, ignoring the top byte.

        Raises:
            ValueOutOfRange: If *value* is negative or wider than 32 bits.
        """
        if not 0 <= value <= _U32_MAX:
            raise ValueOutOfRange(f"rgb value {value} doesn't fit u32")
        _, r, g, b = value.to_bytes(4, "big")
        return cls(r, g, b)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            decode_rgb,
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode_rgb, return_schema=core_schema.int_schema()
            ),
        )


def encode_rgb(color: Rgb) -> int:
    return color.to_u32()


def decode_rgb(value: Any) -> Rgb:
    """Decode the wire integer (or pass an :class:`Rgb` through)."""
    if isinstance(value, Rgb):
        return value
    # bool is an int subclass but never a colour
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected an integer representing an RGB color")
    return Rgb.from_u32(value)


# ── Chat identifier ──────────────────────────────────────────────────────────

#: Numeric chat id or ``@channelusername``. Strict members keep the variant
#: that was supplied: ``"123"`` is never turned into ``123`` or vice versa.
ChatId = Union[
    Annotated[int, Strict(), Field(ge=_I64_MIN, le=_I64_MAX)],
    Annotated[str, Strict(), Field(min_length=1)],
]

_CHAT_ID_ADAPTER: TypeAdapter = TypeAdapter(ChatId)


def encode_chat_id(value: Union[int, str]) -> Union[int, str]:
    """Validate *value* and return it unchanged."""
    return _CHAT_ID_ADAPTER.validate_python(value)


def decode_chat_id(raw: Any) -> Union[int, str]:
    """Decode a wire chat id, preserving whether it was numeric or a username.

    Raises:
        pydantic.ValidationError: If *raw* is neither a 64-bit int nor a non-empty string.
    """
    return _CHAT_ID_ADAPTER.validate_python(raw)


# ── File reference ───────────────────────────────────────────────────────────


class InputFileKind(str, Enum):
    MEMORY = "memory"
    FILE_ID = "file_id"
    URL = "url"


@dataclass(frozen=True)
class InputFile:
    """A file to send: inline bytes, an already uploaded file id, or a URL.

    Only the inline variant has to be uploaded, which switches the whole
    request to ``multipart/form-data``.
    """

    kind: InputFileKind
    value: Union[bytes, str] = field(repr=False)
    filename: Optional[str] = None

    @classmethod
    def memory(cls, data: bytes, filename: str = "file") -> "InputFile":
        return cls(InputFileKind.MEMORY, bytes(data), filename)

    @classmethod
    def file_id(cls, file_id: str) -> "InputFile":
        return cls(InputFileKind.FILE_ID, file_id)

    @classmethod
    def url(cls, url: str) -> "InputFile":
        return cls(InputFileKind.URL, url)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "InputFile":
        """Read a local file into memory, keeping its base name as the filename."""
        path = Path(path)
        return cls.memory(path.read_bytes(), path.name)

    @property
    def needs_upload(self) -> bool:
        return self.kind is InputFileKind.MEMORY

    def to_wire(self) -> str:
        """Return the string form of a file id or URL reference.

        Raises:
            ValueError: For inline bytes, which can only travel as a multipart part.
        """
        if self.needs_upload:
            raise ValueError("inline file content must be sent as a multipart part")
        assert isinstance(self.value, str)
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_input_file, return_schema=core_schema.str_schema()
            ),
        )


def _serialize_input_file(value: InputFile) -> str:
    if value.needs_upload:
        return f"attach://{value.filename}"
    return value.to_wire()
