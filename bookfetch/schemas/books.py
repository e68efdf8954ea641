from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel

# Upstream records have no fixed schema.
RawRecord = Mapping[str, Any]


class CanonicalBook(BaseModel):
    title: str = ""
    author: str = ""
    isbn: str = ""
