"""Exceptions raised by the social share generator."""

from __future__ import annotations


class EmptyContentError(ValueError):
    """Raised when there is no article text left to generate from."""

    def __init__(self, message: str = "Unable to generate content: the article body is empty."):
        super().__init__(message)


class FetchError(RuntimeError):
    """Raised by the article fetcher when a page cannot be retrieved or read."""

    def __init__(self, url: str, reason: str):
        super().__init__(reason)
        self.url = url
        self.reason = reason


__all__ = ["EmptyContentError", "FetchError"]
