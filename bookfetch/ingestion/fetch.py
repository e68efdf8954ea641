from __future__ import annotations

import logging
from typing import Any

import httpx

from bookfetch.core.async_utils import run_async
from bookfetch.core.config import settings
from bookfetch.core.exceptions import FetchFailed, InvalidArgument
from bookfetch.domain.normalize import normalize_books
from bookfetch.schemas.books import CanonicalBook

logger = logging.getLogger(__name__)


def _require_url(api_url: Any) -> str:
    if not isinstance(api_url, str) or not api_url:
        raise InvalidArgument("apiUrl is required")
    return api_url


def _decode(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        # Not JSON: same as any other unrecognized shape.
        logger.debug("response body from %s is not JSON", resp.request.url)
        return None


def extract_records(payload: Any) -> list[Any]:
    """Pull the raw record list out of a decoded response body.

    Accepts a bare list or a mapping with a ``books`` list; everything else
    yields an empty list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        books = payload.get("books")
        if isinstance(books, list):
            return books
    return []


def new_client(timeout: float | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.fetch_timeout_secs if timeout is None else timeout,
        follow_redirects=settings.follow_redirects,
        headers={"User-Agent": settings.user_agent},
    )


async def _get_payload(client: httpx.AsyncClient, url: str) -> Any:
    resp = await client.get(url)
    resp.raise_for_status()
    return _decode(resp)


async def fetch_books(
    api_url: str, *, client: httpx.AsyncClient | None = None
) -> list[CanonicalBook]:
    """GET ``api_url`` and normalize every record in the response.

    A caller-supplied ``client`` is used as-is and left open. Any failure past
    argument validation is raised as FetchFailed.
    """
    url = _require_url(api_url)
    logger.debug("fetching books from %s", url)
    try:
        if client is not None:
            payload = await _get_payload(client, url)
        else:
            async with new_client() as own:
                payload = await _get_payload(own, url)
        return normalize_books(extract_records(payload))
    except Exception as exc:
        logger.debug("book fetch from %s failed: %s", url, exc)
        raise FetchFailed(str(exc)) from None


def fetch_books_sync(
    api_url: str, *, client: httpx.AsyncClient | None = None
) -> list[CanonicalBook]:
    """Blocking form of fetch_books, for callers without an event loop."""
    _require_url(api_url)
    return run_async(fetch_books(api_url, client=client))
