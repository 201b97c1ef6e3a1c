"""Resolve template names against an include path using a template source."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from .config import ProviderConfig
from .urls import is_url, join_url

if TYPE_CHECKING:
    from .source.base import TemplateSource

logger = logging.getLogger(__name__)


class TemplateNotFoundError(Exception):
    """Raised when no include-path entry has the requested template."""


class TemplateLoadError(Exception):
    """Raised when a template was located but could not be loaded."""


class LoadedTemplate(BaseModel):
    """Template text together with where and when it was fetched."""

    name: str
    path: str
    content: str
    modified: float | None = None


class TemplateProvider:
    """Look up templates on the include path and read them through a source.

    Each include-path entry is tried in order. The source is first asked for
    the modification time of the candidate; ``None`` means the entry declines
    and the next one is tried. Otherwise the content is fetched and returned.
    """

    def __init__(
        self,
        options: ProviderConfig | dict[str, Any] | None = None,
        source: TemplateSource | None = None,
    ) -> None:
        self.source = source
        self.config = ProviderConfig()
        self.include_path: list[str] = []
        self.configure(options)

    def configure(self, options: ProviderConfig | dict[str, Any] | None) -> TemplateProvider:
        """Apply ``options``, replacing the include path."""
        self.config = ProviderConfig.from_options(options)
        self.include_path = list(self.config.include_path)
        return self

    @property
    def debug_enabled(self) -> bool:
        return self.config.debug

    def debug(self, message: str) -> None:
        """Trace ``message`` when the debug option is on."""
        if self.config.debug:
            logger.debug(f"[{type(self.source).__name__}] {message}")

    def candidates(self, name: str) -> list[str]:
        """Return the full paths tried for ``name``, in include-path order."""
        return [join_url(base, name) for base in self.include_path]

    def load(self, name: str) -> LoadedTemplate | None:
        """Load ``name`` from the first include-path entry that has it.

        Parameters
        ----------
        name: str
            Template name relative to the include path, or a full URL when
            the ``absolute`` option is set.

        Returns
        -------
        LoadedTemplate | None
            The loaded template, or ``None`` when the ``tolerant`` option
            turns a failure into a decline.

        """
        try:
            return self._load(name)
        except (TemplateNotFoundError, TemplateLoadError) as e:
            if not self.config.tolerant:
                raise
            self.debug(f"declined {name!r}: {e}")
            return None

    def _load(self, name: str) -> LoadedTemplate:
        if self.source is None:
            raise TemplateLoadError("no template source configured")
        if not name:
            raise TemplateLoadError("no template name specified")

        if is_url(name):
            if not self.config.absolute:
                raise TemplateLoadError(f"{name}: absolute paths are not allowed (set ABSOLUTE option)")
            tmpl = self._fetch(name, name)
            if tmpl is None:
                raise TemplateNotFoundError(name)
            return tmpl

        for path in self.candidates(name):
            tmpl = self._fetch(name, path)
            if tmpl is not None:
                return tmpl

        default = self.config.default
        if default and default != name:
            self.debug(f"{name!r} not found, trying default {default!r}")
            return self._load(default)

        raise TemplateNotFoundError(name)

    def _fetch(self, name: str, path: str) -> LoadedTemplate | None:
        if self.source.last_modified(path) is None:
            return None

        result = self.source.fetch(path)
        if not result.ok:
            raise TemplateLoadError(f"{name}: {result.error}")
        return LoadedTemplate(name=name, path=path, content=result.content or "", modified=result.modified)
