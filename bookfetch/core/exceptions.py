from __future__ import annotations


class BookFetchError(Exception):
    pass


class InvalidArgument(BookFetchError, ValueError):
    pass


class FetchFailed(BookFetchError):
    """Raised when the GET request or the response handling fails.

    Only the underlying message survives; status codes and the original
    exception are not kept.
    """

    prefix = "Failed to fetch books: "

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{self.prefix}{reason}")
