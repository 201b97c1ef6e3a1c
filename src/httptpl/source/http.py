"""Fetch templates from a web server instead of local disk."""

from __future__ import annotations

import logging
import threading
import time
from time import perf_counter
from typing import Any

import httpx
from opentelemetry import trace
from prometheus_client import Histogram

from ..config import ProviderConfig
from ..provider import LoadedTemplate, TemplateProvider
from .base import FetchResult, TemplateSource, fix_scheme, is_url

logger = logging.getLogger(__name__)

_tracer = trace.get_tracer(__name__)

_fetch_latency = Histogram(
    "template_fetch_latency_seconds",
    "Time spent fetching a template over HTTP",
    labelnames=["operation", "outcome"],
    registry=None,
)

NO_PATH_ERROR = "no path specified to fetch content from"
NOT_A_URL_ERROR = "not a URL"
REQUEST_ERROR_PREFIX = "error with request: "

# idna rejects some hosts with a UnicodeError before httpx sees them.
_REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL, UnicodeError)


class HTTPTemplateSource(TemplateSource):
    """Serve templates from URLs on the include path.

    Only include-path entries that look like ``http(s)://`` URLs are kept;
    local directories are dropped so a filesystem provider later in the
    chain can handle them.

    There is no caching: every lookup hits the web server. A successful GET
    is reported as "modified now", so anything that compares modification
    times will always see the template as changed.
    """

    def __init__(self, options: ProviderConfig | dict[str, Any] | None = None) -> None:
        self._client: httpx.Client | None = None
        self._owns_client = False
        self._client_lock = threading.Lock()
        self._timeout = ProviderConfig().timeout
        self.provider = TemplateProvider(source=self)
        self.configure(options)

    def configure(self, options: ProviderConfig | dict[str, Any] | None) -> HTTPTemplateSource:
        """Apply ``options`` and keep only URL entries of the include path."""
        config = self.provider.configure(options).config
        self.provider.include_path = [p for p in self.provider.include_path if is_url(p)]
        self._timeout = config.timeout
        if self._owns_client and self._client is not None and self._client is not config.client:
            self._client.close()
        self._client = config.client
        self._owns_client = False
        return self

    @property
    def include_path(self) -> list[str]:
        return self.provider.include_path

    def load(self, name: str) -> LoadedTemplate | None:
        """Resolve ``name`` against the include path."""
        return self.provider.load(name)

    def http_client(self) -> httpx.Client:
        """Return the client, creating a default one on first use."""
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    self._client = httpx.Client(timeout=httpx.Timeout(self._timeout), follow_redirects=True)
                    self._owns_client = True
        return self._client

    def _get(self, operation: str, url: str) -> httpx.Response:
        start = perf_counter()
        outcome = "error"
        try:
            with _tracer.start_as_current_span(
                "template.fetch",
                attributes={"template.url": url, "template.operation": operation},
            ):
                resp = self.http_client().get(url)
            outcome = "success" if resp.is_success else "failure"
            return resp
        finally:
            _fetch_latency.labels(operation, outcome).observe(perf_counter() - start)

    def last_modified(self, path: str | None) -> float | None:
        """Return the current time if ``path`` can be fetched, else ``None``."""
        if not path:
            return None
        path = fix_scheme(path)

        self.provider.debug(f"last_modified( '{path}' )")

        try:
            resp = self._get("last_modified", path)
        except _REQUEST_ERRORS as e:
            logger.debug(f"request for {path} failed: {e}")
            return None
        return time.time() if resp.is_success else None

    def fetch(self, path: str | None) -> FetchResult:
        """Fetch ``path`` and return content, error and modification time."""
        if not path:
            return FetchResult(error=NO_PATH_ERROR)
        path = fix_scheme(path)

        self.provider.debug(f"fetch( '{path}' )")

        if not is_url(path):
            return FetchResult(error=NOT_A_URL_ERROR)

        try:
            resp = self._get("fetch", path)
        except _REQUEST_ERRORS as e:
            logger.debug(f"request for {path} failed: {e}")
            return FetchResult(error=f"{REQUEST_ERROR_PREFIX}{e}")

        if not resp.is_success:
            return FetchResult(error=f"{REQUEST_ERROR_PREFIX}{resp.status_code} {resp.reason_phrase}")
        return FetchResult(content=resp.text, modified=time.time())
