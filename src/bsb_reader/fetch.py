"""Resource transport: reads BSB data files from a directory or over HTTP."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DATA_BASE, REQUEST_TIMEOUT, USER_AGENT


logger = logging.getLogger(__name__)


def create_session() -> requests.Session:
    """HTTP session with keep-alive and retries on transient statuses."""
    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept-Encoding": "gzip, deflate",
    })
    adapter = HTTPAdapter(
        pool_connections=10, pool_maxsize=10,
        max_retries=Retry(total=2, backoff_factor=0.1, status_forcelist=[429, 500, 502, 503, 504])
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class ResourceFetcher:
    """
    Fetches static resources relative to a base location.

    The base is either a local directory or an http(s) URL. Every fetch
    returns None on a missing resource or a failure; nothing is raised.
    """

    def __init__(
        self,
        base: str = DATA_BASE,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base = str(base)
        self.timeout = timeout
        self.is_remote = self.base.startswith(("http://", "https://"))
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = create_session()
        return self._session

    def _url(self, path: str) -> str:
        return f"{self.base.rstrip('/')}/{path.lstrip('/')}"

    def fetch_text(self, path: str) -> Optional[str]:
        """Raw text of a resource, or None if it is missing or unreadable."""
        if self.is_remote:
            return self._fetch_remote(path)
        return self._fetch_local(path)

    def _fetch_remote(self, path: str) -> Optional[str]:
        url = self._url(path)
        try:
            response = self.session.get(url, timeout=self.timeout)
            if response.status_code == 404:
                logger.debug("Resource not found: %s", url)
                return None
            response.raise_for_status()
            response.encoding = "utf-8"
            return response.text
        except requests.RequestException as e:
            logger.warning("Error fetching %s: %s", url, e)
            return None

    def _fetch_local(self, path: str) -> Optional[str]:
        file_path = Path(self.base) / path
        if not file_path.is_file():
            logger.debug("Resource not found: %s", file_path)
            return None
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error reading %s: %s", file_path, e)
            return None

    def fetch_json(self, path: str) -> Optional[Any]:
        """Parsed JSON document, or None."""
        text = self.fetch_text(path)
        if text is None:
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            logger.warning("Error parsing %s: %s", path, e)
            return None

    def fetch_jsonl(self, path: str) -> Optional[list]:
        """One parsed record per non-blank line, in file order, or None."""
        text = self.fetch_text(path)
        if text is None:
            return None
        try:
            return [json.loads(line) for line in text.splitlines() if line.strip()]
        except ValueError as e:
            logger.warning("Error parsing %s: %s", path, e)
            return None
