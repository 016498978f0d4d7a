"""Paths the edge middleware never inspects."""

import re

STATIC_ASSET_PATTERN = re.compile(
    r"^/(?:_next/static|_next/image|favicon\.ico|static/|.*\.(?:svg|png|jpg|jpeg|gif|webp)$)"
)


def is_static_asset(path: str) -> bool:
    """Whether ``path`` is a static asset served without edge processing."""
    return STATIC_ASSET_PATTERN.match(path) is not None
