from bookfetch.core.exceptions import BookFetchError, FetchFailed, InvalidArgument
from bookfetch.domain.normalize import normalize_book, normalize_books
from bookfetch.ingestion.fetch import extract_records, fetch_books, fetch_books_sync
from bookfetch.schemas.books import CanonicalBook, RawRecord

__all__ = [
    "BookFetchError",
    "CanonicalBook",
    "FetchFailed",
    "InvalidArgument",
    "RawRecord",
    "extract_records",
    "fetch_books",
    "fetch_books_sync",
    "normalize_book",
    "normalize_books",
]
