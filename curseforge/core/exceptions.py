"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Sequence


class CurseForgeError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(CurseForgeError):
    """Client or request was configured with unusable values."""

    pass


def format_field_path(field_path: Sequence[str | int]) -> str:
    """Render location tokens as ``data[0].links.wikiUrl``."""
    out = ""
    for token in field_path:
        if isinstance(token, int):
            out += f"[{token}]"
        elif out:
            out += f".{token}"
        else:
            out = str(token)
    return out


class DecodeError(CurseForgeError):
    """Response body did not match the expected shape.

    Carries the raw payload and the exact location of the first offending
    field so that schema drift can be diagnosed without re-parsing the body.
    """

    def __init__(
        self,
        raw_bytes: bytes,
        field_path: Sequence[str | int],
        underlying_cause: str,
    ) -> None:
        self.raw_bytes = raw_bytes
        self.field_path = tuple(field_path)
        self.underlying_cause = underlying_cause
        super().__init__(f"failed to decode `{self.path or '<root>'}`: {underlying_cause}")

    @property
    def path(self) -> str:
        return format_field_path(self.field_path)


class FetchError(CurseForgeError):
    """A single request-response cycle against the remote failed."""

    pass


class TransportError(FetchError):
    """The request could not be completed (connection failure, timeout, bad request)."""

    pass


class StatusError(FetchError):
    """The remote answered with a non-success status code."""

    def __init__(self, message: str, status_code: int, body: bytes = b"") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(FetchError):
    """A successful response whose body failed to decode."""

    def __init__(self, message: str, decode_error: DecodeError) -> None:
        super().__init__(message)
        self.decode_error = decode_error

    @property
    def field_path(self) -> tuple[str | int, ...]:
        return self.decode_error.field_path

    @property
    def raw_bytes(self) -> bytes:
        return self.decode_error.raw_bytes


class ProtocolViolationError(FetchError):
    """The pagination descriptor contradicts the request that produced it.

    Raised when the reported ``index`` differs from the requested offset or
    ``resultCount`` differs from the number of records actually returned.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        expected: int,
        reported: int,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.expected = expected
        self.reported = reported


class ProtocolViolationWarning(UserWarning):
    """Emitted instead of ProtocolViolationError under the WARN policy."""

    pass
