from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from bookfetch.schemas.books import CanonicalBook

TITLE_FIELDS = ("title", "name", "bookTitle")
AUTHOR_FALLBACK_FIELDS = ("authors", "writer")
ISBN_FIELDS = ("isbn", "ISBN")


def _text(value: Any) -> str:
    """Return ``value`` as a string, or "" when it counts as empty.

    Absent, None and "" are empty. Numbers are stringified; containers and
    booleans are not usable as text.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _first(raw: Mapping[str, Any], fields: Iterable[str]) -> str:
    for field in fields:
        value = _text(raw.get(field))
        if value:
            return value
    return ""


def _person(value: Any) -> str:
    if isinstance(value, Mapping):
        return _text(value.get("name"))
    return _text(value)


def _people(value: Any) -> str:
    # "authors" is sometimes a list of strings or of {"name": ...} objects
    if isinstance(value, list):
        return ", ".join(p for p in (_person(v) for v in value) if p)
    return _text(value)


def _author(raw: Mapping[str, Any]) -> str:
    author = raw.get("author")
    if isinstance(author, Mapping):
        # An author object without a name is an explicit empty result.
        return _text(author.get("name"))
    if author_text := _text(author):
        return author_text

    for field in AUTHOR_FALLBACK_FIELDS:
        value = _people(raw.get(field))
        if value:
            return value
    return ""


def _identifier_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _first_identifier(entries: list[Any]) -> str:
    first = entries[0]
    if isinstance(first, Mapping):
        return _text(first.get("identifier"))
    return ""


def _isbn_from_identifiers(raw: Mapping[str, Any]) -> str:
    identifiers = _identifier_list(raw.get("identifiers"))
    if not identifiers:
        return ""
    match = next(
        (
            e
            for e in identifiers
            if isinstance(e, Mapping)
            and isinstance(e.get("type"), str)
            and "isbn" in e["type"].lower()
        ),
        None,
    )
    if match is not None and (found := _text(match.get("identifier"))):
        return found
    return _first_identifier(identifiers)


def _isbn(raw: Mapping[str, Any]) -> str:
    isbn = _first(raw, ISBN_FIELDS) or _isbn_from_identifiers(raw)
    if isbn:
        return isbn

    industry = _identifier_list(raw.get("industryIdentifiers"))
    if industry:
        return _first_identifier(industry)
    return ""


def normalize_book(raw: Any = None) -> CanonicalBook:
    """Map one loosely-typed upstream record to a CanonicalBook.

    Never raises: anything that is not a mapping is treated as an empty
    record, and unmatched fields default to "".
    """
    if not isinstance(raw, Mapping):
        raw = {}
    return CanonicalBook(title=_first(raw, TITLE_FIELDS), author=_author(raw), isbn=_isbn(raw))


def normalize_books(records: Iterable[Any]) -> list[CanonicalBook]:
    return [normalize_book(r) for r in records]
