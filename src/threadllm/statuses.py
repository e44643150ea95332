"""Status enumerations for the loader and output formats."""

from __future__ import annotations

from enum import StrEnum


class FetchState(StrEnum):
    """Thread loader lifecycle."""
    IDLE = "idle"
    FETCHING = "fetching"
    SUCCESS = "success"
    FAILED = "failed"


class ErrorKind(StrEnum):
    """User-facing failure categories."""
    EMPTY_INPUT = "empty_input"
    INVALID_INPUT = "invalid_input"
    FETCH_FAILED = "fetch_failed"
    NETWORK_ERROR = "network_error"


class RenderMode(StrEnum):
    """Output encodings."""
    TXT = "txt"
    TOON = "toon"
    JSON = "json"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]


_MODE_LABELS = {
    RenderMode.TXT: "LLM text",
    RenderMode.TOON: "Compact text",
    RenderMode.JSON: "JSON",
}

ERROR_MESSAGES = {
    ErrorKind.EMPTY_INPUT: "Enter a URL or Post ID.",
    ErrorKind.INVALID_INPUT: "Invalid URL or Post ID.",
    ErrorKind.FETCH_FAILED: "Failed to load Reddit thread.",
    ErrorKind.NETWORK_ERROR: "Network error.",
}
