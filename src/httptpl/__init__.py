"""httptpl: serve templates from a web server."""

from __future__ import annotations

from .config import ProviderConfig, load_config
from .jinja import HTTPTemplateLoader
from .provider import (
    LoadedTemplate,
    TemplateLoadError,
    TemplateNotFoundError,
    TemplateProvider,
)
from .source import FetchResult, HTTPTemplateSource, TemplateSource
from .urls import fix_scheme, is_url

__all__ = [
    "ProviderConfig",
    "load_config",
    "HTTPTemplateLoader",
    "LoadedTemplate",
    "TemplateLoadError",
    "TemplateNotFoundError",
    "TemplateProvider",
    "FetchResult",
    "HTTPTemplateSource",
    "TemplateSource",
    "fix_scheme",
    "is_url",
]
