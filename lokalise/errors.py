"""Errors raised by the API client."""

from __future__ import annotations

from typing import Any


class LokaliseError(Exception):
    """Base class for all errors raised by this package."""


class ApiError(LokaliseError):
    """An error reported by the API in a response body."""

    def __init__(self, code: int = 0, message: str = "") -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"API request error {self.code} {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    @classmethod
    def from_payload(cls, payload: Any) -> "ApiError":
        """Build the error from a response body of the form {"error": {...}}."""
        if not isinstance(payload, dict) or not isinstance(payload.get("error"), dict):
            raise LokaliseError("lokalise: response error model unknown")
        error = payload["error"]
        return cls(int(error.get("code") or 0), str(error.get("message") or ""))


def raise_for_error(status_code: int, payload: Any) -> None:
    """Raise if the status code marks the response as an error."""
    if status_code < 400:
        return
    if payload is None:
        raise LokaliseError("lokalise: response marked as error but no data returned")
    raise ApiError.from_payload(payload)