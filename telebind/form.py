"""Form encoder: turns a request's fields into a JSON body or multipart parts.

Whether a request needs ``multipart/form-data`` is only known once every
field has been collected, because an inline file may hide inside a nested
value (e.g. one item of a media group). :class:`FormBuilder` therefore
buffers fields as tagged pending entries and decides the transport in
:meth:`FormBuilder.build`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel

from telebind.codecs import InputFile, Rgb


class TransportMode(str, Enum):
    JSON = "json"
    MULTIPART = "multipart"


class FieldKind(Enum):
    SCALAR = "scalar"
    STRUCTURED = "structured"
    FILE = "file"
    NULL = "null"


@dataclass(frozen=True)
class FilePart:
    """Raw file content registered as a multipart part."""

    filename: str
    data: bytes = field(repr=False)


@dataclass
class _PendingField:
    name: str
    value: Any
    kind: FieldKind


#: ``(name, (filename, content))`` tuples in the shape ``requests`` expects for
#: ``files=``; a ``None`` filename makes a plain text part.
MultipartParts = List[Tuple[str, Tuple[Optional[str], Union[str, bytes]]]]


@dataclass
class Form:
    """A finalized parameter set plus the transport it has to travel with.

    In JSON mode ``params`` holds JSON-compatible values. In multipart mode it
    holds text (``str``) for ordinary fields and :class:`FilePart` for uploads.
    """

    mode: TransportMode
    params: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_multipart(self) -> bool:
        return self.mode is TransportMode.MULTIPART

    def json_body(self) -> bytes:
        if self.is_multipart:
            raise ValueError("multipart form has no JSON body")
        return json.dumps(self.params, ensure_ascii=False).encode("utf-8")

    def multipart_parts(self) -> MultipartParts:
        parts: MultipartParts = []
        for name, value in self.params.items():
            if isinstance(value, FilePart):
                parts.append((name, (value.filename, value.data)))
            else:
                parts.append((name, (None, value)))
        return parts


class FormBuilder:
    """Collects request fields in call order.

    Usage::

        form = (
            FormBuilder()
            .add("chat_id", chat_id)
            .add("media", media)
            .add_if_some("disable_notification", disable_notification)
            .build()
        )
    """

    def __init__(self) -> None:
        self._fields: List[_PendingField] = []
        self._names: set[str] = set()

    def _push(self, name: str, value: Any, kind: FieldKind) -> "FormBuilder":
        if name in self._names:
            raise ValueError(f"duplicate form field {name!r}")
        self._names.add(name)
        self._fields.append(_PendingField(name, value, kind))
        return self

    def add(self, name: str, value: Any) -> "FormBuilder":
        if value is None:
            raise ValueError(f"field {name!r} is None; use add_if_some or add_null")
        if isinstance(value, InputFile):
            return self._push(name, value, FieldKind.FILE)
        if isinstance(value, (BaseModel, Mapping, list, tuple)):
            return self._push(name, value, FieldKind.STRUCTURED)
        return self._push(name, value, FieldKind.SCALAR)

    def add_if_some(self, name: str, value: Any) -> "FormBuilder":
        if value is None:
            return self
        return self.add(name, value)

    def add_file(self, name: str, file: InputFile) -> "FormBuilder":
        """Register a file field; only inline content forces multipart."""
        return self._push(name, file, FieldKind.FILE)

    def add_null(self, name: str) -> "FormBuilder":
        """Send an explicit null, e.g. to remove a caption."""
        return self._push(name, None, FieldKind.NULL)

    def build(self) -> Form:
        multipart = any(_contains_upload(pending.value) for pending in self._fields)
        if multipart:
            return _MultipartEncoder().encode(self._fields)
        form = Form(TransportMode.JSON)
        for pending in self._fields:
            form.params[pending.name] = to_wire(pending.value, _no_uploads)
        return form


class _MultipartEncoder:
    def __init__(self) -> None:
        self._form = Form(TransportMode.MULTIPART)
        self._attached: List[Tuple[str, FilePart]] = []

    def _attach(self, file: InputFile) -> str:
        name = f"file{len(self._attached)}"
        self._attached.append((name, FilePart(file.filename or name, file.value)))
        return f"attach://{name}"

    def encode(self, fields: List[_PendingField]) -> Form:
        params = self._form.params
        for pending in fields:
            value = pending.value
            if pending.kind is FieldKind.NULL:
                params[pending.name] = ""
            elif isinstance(value, InputFile) and value.needs_upload:
                params[pending.name] = FilePart(value.filename or pending.name, value.value)
            elif pending.kind is FieldKind.STRUCTURED:
                params[pending.name] = json.dumps(to_wire(value, self._attach), ensure_ascii=False)
            else:
                params[pending.name] = _to_text(to_wire(value, self._attach))
        for name, part in self._attached:
            if name in params:
                raise ValueError(f"attachment name {name!r} clashes with a form field")
            params[name] = part
        return self._form


def _no_uploads(file: InputFile) -> str:
    raise ValueError("inline file found while encoding a JSON body")


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # bools and numbers share JSON's spelling: true, 42, 1.5
    return json.dumps(value)


def to_wire(value: Any, attach: Callable[[InputFile], str]) -> Any:
    """Convert *value* into JSON-compatible data.

    Unset (``None``) members of models and mappings are dropped. Inline files
    are handed to *attach*, which returns the string that references them.
    """
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Rgb):
        return value.to_u32()
    if isinstance(value, InputFile):
        return attach(value) if value.needs_upload else value.to_wire()
    if isinstance(value, BaseModel):
        out: Dict[str, Any] = {}
        for name, info in type(value).model_fields.items():
            member = getattr(value, name)
            if member is not None:
                out[info.alias or name] = to_wire(member, attach)
        return out
    if isinstance(value, Mapping):
        return {str(k): to_wire(v, attach) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [to_wire(item, attach) for item in value]
    raise TypeError(f"cannot encode {type(value).__name__} into a form field")


def _contains_upload(value: Any) -> bool:
    if isinstance(value, InputFile):
        return value.needs_upload
    if isinstance(value, BaseModel):
        return any(_contains_upload(getattr(value, name)) for name in type(value).model_fields)
    if isinstance(value, Mapping):
        return any(_contains_upload(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(_contains_upload(item) for item in value)
    return False
