"""The contract shared by every endpoint request.

An endpoint is declared as a pydantic model parameterised by its output
type; the model fields are its parameters, in wire order::

    class DeleteChatPhoto(Request[TrueResult]):
        method_name: ClassVar[str] = "deleteChatPhoto"

        chat_id: ChatId

Requests are created through :class:`~telebind.client.Bot`, tweaked with
fluent setters and consumed by :meth:`Request.send`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.fields import FieldInfo

from telebind.codecs import InputFile
from telebind.exceptions import RequestAlreadySent
from telebind.form import Form, FormBuilder
from telebind.network import dispatch

if TYPE_CHECKING:
    from telebind.client import Bot

OutputT = TypeVar("OutputT")

_SETTER_PREFIX = "with_"

#: ``Field(json_schema_extra=EXPLICIT_NULL)`` marks a parameter that may be
#: sent as ``null`` to clear a value.
EXPLICIT_NULL = {"explicit_null": True}


def _allows_explicit_null(info: FieldInfo) -> bool:
    extra = info.json_schema_extra
    return isinstance(extra, dict) and bool(extra.get("explicit_null"))


class Request(BaseModel, Generic[OutputT]):
    """Base class of all endpoint requests.

    Subclasses set :attr:`method_name`; :attr:`output_type` is taken from the
    generic parameter. A request is bound to a :class:`~telebind.client.Bot`
    it does not own and can be sent only once.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
    )

    method_name: ClassVar[str]
    output_type: ClassVar[Any] = Any

    _bot: Any = PrivateAttr(default=None)
    _sent: bool = PrivateAttr(default=False)

    def __init__(self, bot: "Bot", /, **data: Any) -> None:
        super().__init__(**data)
        self._bot = bot

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for base in cls.__mro__:
            meta = getattr(base, "__pydantic_generic_metadata__", None) or {}
            if meta.get("origin") is Request and meta.get("args"):
                cls.output_type = meta["args"][0]
                break

    # ------------------------------------------------------------------
    #  Fluent setters
    # ------------------------------------------------------------------

    def set(self, **values: Any) -> "Request[OutputT]":
        """Assign several parameters at once and return ``self``.

        Values are validated against the field types; the last assignment to a
        field wins.
        """
        self._ensure_unsent()
        for name, value in values.items():
            setattr(self, name, value)
        return self

    def __getattr__(self, name: str) -> Any:
        if name.startswith(_SETTER_PREFIX) and name[len(_SETTER_PREFIX):] in type(self).model_fields:
            field_name = name[len(_SETTER_PREFIX):]

            def setter(value: Any) -> "Request[OutputT]":
                return self.set(**{field_name: value})

            return setter
        return super().__getattr__(name)  # type: ignore[misc]

    # ------------------------------------------------------------------
    #  Encoding and dispatch
    # ------------------------------------------------------------------

    @property
    def bot(self) -> "Bot":
        return self._bot

    @property
    def is_sent(self) -> bool:
        return self._sent

    @property
    def long_poll(self) -> float:
        """Seconds the server may hold this request open; 0 for ordinary calls."""
        return 0

    def _ensure_unsent(self) -> None:
        if self._sent:
            raise RequestAlreadySent(f"{self.method_name} request has already been sent")

    def build_form(self) -> Form:
        """Encode the parameters, omitting unset optional ones."""
        builder = FormBuilder()
        for name, info in type(self).model_fields.items():
            key = info.alias or name
            value = getattr(self, name)
            if value is None:
                if _allows_explicit_null(info) and name in self.model_fields_set:
                    builder.add_null(key)
                continue
            if isinstance(value, InputFile):
                builder.add_file(key, value)
            else:
                builder.add(key, value)
        return builder.build()

    async def send(self) -> OutputT:
        """Send the request and return the decoded result.

        Raises:
            RequestAlreadySent: If the request was sent before.
            NetworkError: On transport failure.
            APIException: If the Bot API reports an error.
            DecodeError: If the result doesn't match :attr:`output_type`.
        """
        self._ensure_unsent()
        self._sent = True
        form = self.build_form()
        return await dispatch(self._bot, self.method_name, form, self.output_type, long_poll=self.long_poll)

    def __await__(self) -> Any:
        return self.send().__await__()

