"""Cookie mutation value object shared by the edge components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class CookieToSet:
    """A cookie the edge wants written on the outgoing response.

    A ``max_age`` of 0 with an empty value expires the cookie.
    """

    name: str
    value: str
    max_age: int | None = None
    path: str = "/"
    same_site: Literal["lax", "strict", "none"] = "lax"
    secure: bool = False
    http_only: bool = False

    @classmethod
    def expire(cls, name: str, path: str = "/") -> CookieToSet:
        """Build a cookie that deletes ``name`` on the client."""
        return cls(name=name, value="", max_age=0, path=path)
