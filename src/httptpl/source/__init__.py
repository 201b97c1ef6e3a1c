"""Template sources package."""

from __future__ import annotations

from .base import FetchResult, TemplateSource
from .http import HTTPTemplateSource

__all__ = [
    "FetchResult",
    "TemplateSource",
    "HTTPTemplateSource",
]
