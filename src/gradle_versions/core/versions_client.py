"""HTTP client for the published Gradle versions endpoint."""

from __future__ import annotations

import logging

import requests

from gradle_versions.config.settings import settings
from gradle_versions.errors import RemoteUnavailableError

logger = logging.getLogger(__name__)


class VersionsClient:
    """Downloads the raw version catalog from services.gradle.org."""

    def __init__(
        self,
        url: str | None = None,
        connect_timeout: float | None = None,
        read_timeout: float | None = None,
    ):
        self.url = url or settings.versions_url
        self.connect_timeout = connect_timeout if connect_timeout is not None else settings.connect_timeout
        self.read_timeout = read_timeout if read_timeout is not None else settings.read_timeout

    def download(self) -> str:
        """GET the catalog and return the response body as text.

        Raises RemoteUnavailableError on timeouts, connection and HTTP
        errors, and bodies that are not valid UTF-8.
        """
        logger.debug("Downloading Gradle versions from %s", self.url)
        try:
            res = requests.get(
                self.url,
                timeout=(self.connect_timeout, self.read_timeout),
                headers={"Accept": "application/json"},
            )
            res.raise_for_status()
        except requests.Timeout as exc:
            raise RemoteUnavailableError(
                f"Request to {self.url} timed out after {self.connect_timeout}s/{self.read_timeout}s"
            ) from exc
        except requests.RequestException as exc:  # includes ConnectionError and HTTPError
            raise RemoteUnavailableError(f"Cannot download published Gradle versions: {exc}") from exc

        try:
            text = res.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RemoteUnavailableError(f"Response from {self.url} is not valid UTF-8") from exc
        logger.debug("Downloaded %d bytes of version information", len(text))
        return text
