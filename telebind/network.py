"""Dispatcher and the HTTP transport it talks through.

:func:`dispatch` performs exactly one HTTP exchange per call and hands the
result to :func:`telebind.envelope.decode_response`. Blocking transport I/O
is offloaded via :func:`asyncio.to_thread` so the event loop is never
blocked; retries and pacing are left to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Protocol, Tuple, Union

import requests

from telebind.envelope import decode_response
from telebind.exceptions import NetworkError
from telebind.form import Form, MultipartParts

if TYPE_CHECKING:
    from telebind.client import Bot

logger = logging.getLogger("telebind.network")


@dataclass(frozen=True)
class JsonBody:
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class MultipartBody:
    parts: MultipartParts = field(repr=False)


Body = Union[JsonBody, MultipartBody]


class Transport(Protocol):
    """What the dispatcher needs from an HTTP client.

    Implementations raise :class:`requests.RequestException` or
    :class:`OSError` on transport failures.
    """

    def execute(
        self, url: str, headers: Dict[str, str], body: Body, long_poll: float = 0
    ) -> Tuple[int, bytes]:
        """POST *body* to *url*.

        *long_poll* is how many seconds the server may hold the request
        before answering; it extends the HTTP timeout.
        """
        ...

    def fetch(self, url: str) -> Tuple[int, bytes]:
        ...


class RequestsTransport:
    """Default :class:`Transport` built on :mod:`requests`."""

    _DEFAULT_TIMEOUT: int = 10

    def __init__(self, timeout: float = _DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    def execute(
        self, url: str, headers: Dict[str, str], body: Body, long_poll: float = 0
    ) -> Tuple[int, bytes]:
        timeout = self._timeout + long_poll
        if isinstance(body, JsonBody):
            headers = {**headers, "Content-Type": "application/json"}
            response = requests.post(url, data=body.data, headers=headers, timeout=timeout)
        else:
            # requests generates the multipart boundary and Content-Type itself
            response = requests.post(url, files=body.parts, headers=headers, timeout=timeout)
        return response.status_code, response.content

    def fetch(self, url: str) -> Tuple[int, bytes]:
        response = requests.get(url, timeout=self._timeout)
        return response.status_code, response.content


def _redact(bot: "Bot", exc: BaseException) -> str:
    # requests puts the full URL, token included, into its messages
    return str(exc).replace(bot.token, "<token>") if bot.token else str(exc)


def encode_body(form: Form) -> Body:
    if form.is_multipart:
        return MultipartBody(form.multipart_parts())
    return JsonBody(form.json_body())


async def dispatch(bot: "Bot", method_name: str, form: Form, output_type: Any, long_poll: float = 0) -> Any:
    """Send *form* to *method_name* and decode the response into *output_type*.

    *long_poll* is the server-side wait of a long-polling call such as
    ``getUpdates``; the transport adds it to its HTTP timeout.

    Raises:
        NetworkError: The exchange failed or returned garbage with a non-2xx status.
        APIException: The Bot API answered ``ok: false``.
        DecodeError: ``result`` did not match *output_type*.
    """
    body = encode_body(form)
    logger.debug(
        "Dispatching request",
        extra={"api_endpoint": method_name, "transport": form.mode.value, "fields": list(form.params)},
    )
    try:
        status, raw = await asyncio.to_thread(
            bot.transport.execute, bot.method_url(method_name), {}, body, long_poll
        )
    except (requests.RequestException, OSError) as exc:
        error = _redact(bot, exc)
        logger.error("Request failed", extra={"api_endpoint": method_name, "error": error})
        raise NetworkError(f"{method_name}: {error}") from exc
    return decode_response(status, raw, output_type, method=method_name)


async def fetch(bot: "Bot", url: str) -> bytes:
    """GET *url* through the bot's transport and return the body.

    Raises:
        NetworkError: On transport failure or a non-2xx status.
    """
    try:
        status, raw = await asyncio.to_thread(bot.transport.fetch, url)
    except (requests.RequestException, OSError) as exc:
        raise NetworkError(_redact(bot, exc)) from exc
    if not 200 <= status < 300:
        raise NetworkError(f"file download failed with HTTP {status}", status_code=status)
    return raw
