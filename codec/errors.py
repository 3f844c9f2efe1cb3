"""Exceptions raised while converting values between wire and native form."""

from typing import Any, Optional


class CoercionError(Exception):
    """Base class for wire/native conversion failures.

    Attributes:
        reason: Human-readable description of what was wrong.
        path: Field path of the offending value (e.g. 'rows[2].createTime'),
            or None when raised outside of a record traversal.
        value: The raw value that could not be converted.
    """

    def __init__(self, reason: str, value: Any = None, path: Optional[str] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.value = value
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.reason} (got {self.value!r})"
        return f"{self.reason} (got {self.value!r})"


class DecodeError(CoercionError):
    """Raised when wire data is malformed (bad base64, integer or timestamp)."""

    pass


class EncodeError(CoercionError):
    """Raised when a native value has no valid wire representation."""

    pass
