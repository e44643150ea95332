"""Exceptions raised by the library layer and mapped to messages by the loader."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Input is neither a bare thread id nor a URL with a /comments/<id> path."""


class PayloadError(ValueError):
    """The thread JSON does not have the expected [post listing, comment listing] shape."""
