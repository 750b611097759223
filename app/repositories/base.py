"""Base repository class - raw document access by path or URL."""

from pathlib import Path

import httpx
from loguru import logger

from settings import HTTP_TIMEOUT


def is_url(source: str) -> bool:
    """Check if source points at an http(s) endpoint."""
    return source.startswith(("http://", "https://"))


class BaseRepository:
    """Base repository reading one static document."""

    def __init__(self, source: str | Path, timeout: float | None = HTTP_TIMEOUT):
        self._source = str(source)
        self._timeout = timeout
        logger.debug("{} initialized: {}", self.__class__.__name__, self._source)

    @property
    def source(self) -> str:
        return self._source

    def read_text(self) -> str:
        """Fetch document body. Raises OSError or httpx.HTTPError."""
        if is_url(self._source):
            resp = httpx.get(self._source, timeout=self._timeout, follow_redirects=True)
            resp.raise_for_status()
            return resp.text
        return Path(self._source).read_text(encoding="utf-8")
