"""Exception hierarchy for the telebind Bot API client."""

from typing import Any, Dict, Optional


class TelebindError(Exception):
    """Base class for every error raised by this package."""


class RequestError(TelebindError):
    """Base class for failures of a dispatched request."""


class NetworkError(RequestError):
    """Transport-level failure: connection error, timeout or malformed HTTP.

    Attributes:
        status_code: HTTP status code, when a response was received at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class APIException(RequestError):
    """The Bot API answered with ``ok: false``.

    Attributes:
        error_code: ``error_code`` from the response envelope.
        description: Human-readable ``description`` from the envelope.
        retry_after: Seconds to wait before repeating (flood control), if sent.
        migrate_to_chat_id: New supergroup id after a group upgrade, if sent.
        status_code: HTTP status code of the response.
        response_body: Raw response envelope as a dict.
    """

    def __init__(
        self,
        error_code: int,
        description: str,
        retry_after: Optional[int] = None,
        migrate_to_chat_id: Optional[int] = None,
        status_code: Optional[int] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.error_code = error_code
        self.description = description
        self.retry_after = retry_after
        self.migrate_to_chat_id = migrate_to_chat_id
        self.status_code = status_code
        self.response_body = response_body or {}
        super().__init__(f"API error {error_code}: {description}")


class DecodeError(RequestError):
    """The envelope reported success but ``result`` did not match the output type.

    When a codec rejected a value, e.g. a colour wider than 32 bits, the
    :class:`ValueOutOfRange` it raised is the ``__cause__``.
    """


class ValueOutOfRange(TelebindError, ValueError):
    """A value does not fit the domain of its wire encoding."""


class RequestAlreadySent(TelebindError, RuntimeError):
    """A request object was used after it had been sent."""
