"""Response envelope decoder.

Every Bot API response is framed as::

    {"ok": true, "result": ...}
    {"ok": false, "error_code": 429, "description": "...",
     "parameters": {"retry_after": 5}}

:func:`decode_response` maps that frame onto the typed result or onto one of
:class:`~telebind.exceptions.NetworkError`,
:class:`~telebind.exceptions.APIException` and
:class:`~telebind.exceptions.DecodeError`.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, ValidationError, model_validator, TypeAdapter

from telebind.exceptions import APIException, DecodeError, NetworkError, ValueOutOfRange
from telebind.types import ResponseParameters

logger = logging.getLogger("telebind.envelope")


class ResponseEnvelope(BaseModel):
    """The outer JSON wrapper of every Bot API response."""

    ok: bool
    result: Any = None
    error_code: Optional[int] = None
    description: Optional[str] = None
    parameters: Optional[ResponseParameters] = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _check_frame(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("response envelope is not a JSON object")
        if data.get("ok") is True and "result" not in data:
            raise ValueError("successful envelope without result")
        if data.get("ok") is False and ("error_code" not in data or "description" not in data):
            raise ValueError("failed envelope without error_code/description")
        return data


@lru_cache(maxsize=None)
def _adapter(output_type: Any) -> TypeAdapter:
    return TypeAdapter(output_type)


def _codec_error(exc: ValidationError) -> BaseException:
    """Return the codec error behind *exc*, e.g. a colour wider than u32."""
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, ValueOutOfRange):
            return cause
    return exc


def _is_success_status(status: int) -> bool:
    return 200 <= status < 300


def decode_response(status: int, raw: bytes, output_type: Any, method: Optional[str] = None) -> Any:
    """Decode a raw HTTP response body into *output_type*.

    Args:
        status: HTTP status code of the exchange.
        raw: Response body bytes.
        output_type: Anything a :class:`pydantic.TypeAdapter` accepts.
        method: Bot API method name, used for logging only.

    Raises:
        NetworkError: Non-2xx response whose body is not a valid envelope.
        APIException: Valid envelope with ``ok: false``.
        DecodeError: 2xx response whose envelope or ``result`` doesn't match.
    """
    try:
        body = json.loads(raw)
        envelope = ResponseEnvelope.model_validate(body)
    except (ValueError, ValidationError) as exc:
        if not _is_success_status(status):
            raise NetworkError(f"HTTP {status} without a valid response envelope", status_code=status) from exc
        raise DecodeError(f"malformed response envelope: {exc}") from exc

    if not envelope.ok:
        params = envelope.parameters or ResponseParameters()
        logger.warning(
            "Bot API returned an error",
            extra={
                "api_endpoint": method,
                "error_code": envelope.error_code,
                "description": envelope.description,
                "retry_after": params.retry_after,
            },
        )
        raise APIException(
            error_code=envelope.error_code,
            description=envelope.description,
            retry_after=params.retry_after,
            migrate_to_chat_id=params.migrate_to_chat_id,
            status_code=status,
            response_body=body,
        )

    try:
        return _adapter(output_type).validate_python(envelope.result)
    except ValidationError as exc:
        raise DecodeError(f"unexpected result for {method or 'request'}: {exc}") from _codec_error(exc)
