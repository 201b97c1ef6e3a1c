"""Helpers for recognising template URLs."""

from __future__ import annotations

import re

URL_PATTERN = re.compile(r"^https?://\w", re.IGNORECASE)

# Path joining elsewhere can collapse "//" and leave "http:/host".
_BROKEN_SCHEME = re.compile(r"http:/(?!/)")


def is_url(path: str | None) -> bool:
    """Return ``True`` when ``path`` looks like an http(s) URL."""
    return bool(path) and URL_PATTERN.match(path) is not None


def fix_scheme(path: str) -> str:
    """Repair ``http:/host`` into ``http://host``; other paths are returned as is."""
    return _BROKEN_SCHEME.sub("http://", path, count=1)


def join_url(base: str, name: str) -> str:
    """Join an include-path entry and a template name with a single slash."""
    return f"{base.rstrip('/')}/{name.lstrip('/')}"
