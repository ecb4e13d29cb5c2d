"""Fetch strategy backed by the GitHub "latest release" API."""

import logging

import requests

from vercheck.core.fetch.abc import FetchStrategy
from vercheck.version import __version__

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
DEFAULT_HTTP_TIMEOUT = 30.0


class ReleasesApiStrategy(FetchStrategy):
    """Default strategy: tag name of the repository's latest published release.

    Uses a shared requests.Session so consecutive repositories reuse the
    connection to the API host.
    """

    def __init__(
        self,
        token: str | None,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        api_url: str = GITHUB_API_URL,
    ) -> None:
        """Initialize ReleasesApiStrategy.

        Args:
            token: Bearer token sent in the Authorization header
            session: Session to issue requests with (a new one if None)
            timeout: Per-request timeout in seconds
            api_url: Base URL of the GitHub REST API
        """
        self._token = token
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout
        self._api_url = api_url.rstrip("/")

    @property
    def name(self) -> str:
        return "releases-api"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": f"vercheck/{__version__}",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def fetch(self, repo: str) -> str | None:
        url = f"{self._api_url}/repos/{repo}/releases/latest"
        logger.debug("Fetching: %s", url)

        try:
            response = self._session.get(url, headers=self._headers(), timeout=self._timeout)
        except requests.RequestException as e:
            logger.debug("Request failed for %s: %s", repo, e)
            return None

        logger.debug("Response code: %s", response.status_code)
        if not response.ok:
            logger.debug("API Error: %s %s", response.status_code, response.reason)
            return None

        # requests raises a ValueError subclass for undecodable bodies
        try:
            data = response.json()
        except ValueError as e:
            logger.debug("JSON Parse Error: %s", e)
            return None

        if not isinstance(data, dict):
            logger.debug("Unexpected payload type for %s: %s", repo, type(data).__name__)
            return None

        tag_name = data.get("tag_name")
        if not isinstance(tag_name, str):
            logger.debug("No tag_name in latest release of %s", repo)
            return None

        logger.debug("Got version: %s", tag_name)
        return tag_name
