"""Template source interface and URL helpers shared by sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from ..urls import URL_PATTERN, fix_scheme, is_url

__all__ = ["URL_PATTERN", "FetchResult", "TemplateSource", "fix_scheme", "is_url"]


class FetchResult(BaseModel):
    """Outcome of a single content fetch."""

    content: str | None = None
    error: str | None = None
    modified: float | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_tuple(self) -> tuple[str | None, str | None, float | None]:
        """Return ``(content, error, modified)``."""
        return self.content, self.error, self.modified


class TemplateSource(ABC):
    """Capabilities a provider needs to read templates from somewhere."""

    @abstractmethod
    def configure(self, options: Any) -> TemplateSource:
        """Apply provider options and return ``self``."""
        raise NotImplementedError

    @abstractmethod
    def last_modified(self, path: str | None) -> float | None:
        """Return the modification time of ``path``.

        Parameters
        ----------
        path: str | None
            Full path or URL of the template.

        Returns
        -------
        float | None
            Epoch seconds, or ``None`` if the template is unavailable.

        """
        raise NotImplementedError

    @abstractmethod
    def fetch(self, path: str | None) -> FetchResult:
        """Fetch ``path`` and report content, error and modification time.

        Parameters
        ----------
        path: str | None
            Full path or URL of the template.

        Returns
        -------
        FetchResult
            ``content`` and ``modified`` on success, ``error`` otherwise.

        """
        raise NotImplementedError

    def fetch_content(self, path: str | None) -> str | None:
        """Return only the template text, or ``None`` on any failure."""
        return self.fetch(path).content
