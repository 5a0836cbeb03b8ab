"""Typed Telegram Bot API client -- request objects, form encoding and dispatch.

Usage::

    from telebind import Bot, InputFile, APIException

    bot = Bot(token)
    await bot.send_photo(chat_id, InputFile.from_path("cat.jpg")).with_caption("meow")
"""

from telebind.client import Bot, default_bot
from telebind.codecs import ChatId, InputFile, Rgb
from telebind.exceptions import (
    APIException,
    DecodeError,
    NetworkError,
    RequestAlreadySent,
    RequestError,
    TelebindError,
    ValueOutOfRange,
)
from telebind.form import Form, FormBuilder, TransportMode
from telebind.request import Request

__all__ = [
    "Bot",
    "default_bot",
    "ChatId",
    "InputFile",
    "Rgb",
    "Form",
    "FormBuilder",
    "TransportMode",
    "Request",
    "TelebindError",
    "RequestError",
    "NetworkError",
    "APIException",
    "DecodeError",
    "ValueOutOfRange",
    "RequestAlreadySent",
]
