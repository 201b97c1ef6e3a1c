"""Jinja2 loader backed by :class:`HTTPTemplateSource`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from jinja2 import BaseLoader, Environment, TemplateNotFound

from .config import ProviderConfig
from .provider import TemplateLoadError, TemplateNotFoundError
from .source.http import HTTPTemplateSource


class HTTPTemplateLoader(BaseLoader):
    """Load Jinja2 templates over HTTP.

    Combine with :class:`jinja2.ChoiceLoader` to fall back to local
    templates when the web server does not have one::

        env = Environment(loader=ChoiceLoader([
            HTTPTemplateLoader({"INCLUDE_PATH": ["http://tmpl.example.com/"]}),
            FileSystemLoader("templates"),
        ]))
    """

    def __init__(self, source: HTTPTemplateSource | ProviderConfig | dict[str, Any] | None = None) -> None:
        if not isinstance(source, HTTPTemplateSource):
            source = HTTPTemplateSource(source)
        self.source = source

    def get_source(self, environment: Environment, template: str) -> tuple[str, str, Callable[[], bool]]:
        try:
            tmpl = self.source.load(template)
        except TemplateNotFoundError:
            raise TemplateNotFound(template) from None
        except TemplateLoadError as e:
            raise TemplateNotFound(template, message=str(e)) from e

        if tmpl is None:
            raise TemplateNotFound(template)

        url, modified = tmpl.path, tmpl.modified

        def uptodate() -> bool:
            return modified is not None and self.source.last_modified(url) == modified

        return tmpl.content, url, uptodate
