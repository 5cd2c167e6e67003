from typing import Any

import httpx

from authorship_engine import __version__
from authorship_engine.core.domain.ci.value_objects import CiCredential
from authorship_engine.core.exceptions import NetworkError
from authorship_engine.infrastructure.observability.logger_factory_service import get_logger
from authorship_engine.infrastructure.observability.redaction_service import redact_text

logger = get_logger(__name__)

USER_AGENT = f"authorship-engine/{__version__}"
_BODY_SNIPPET_LIMIT = 500


class GitLabHttpClient:
    """Single-attempt GET client for the GitLab REST API (v4)."""

    _PROVIDER = "GitLab"

    def __init__(
        self,
        api_url: str,
        credential: CiCredential,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = api_url.rstrip("/")
        self._credential = credential
        self._timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            **self._credential.auth_headers(),
        }

    def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """GET ``path``; anything other than 200 raises NetworkError."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.info("GitLab API request", url=url, params=params)
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(url, headers=self._get_headers(), params=params)
        except httpx.TimeoutException as exc:
            raise NetworkError(
                provider=self._PROVIDER,
                message=f"GitLab API request timed out after {self._timeout}s: {url}",
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(
                provider=self._PROVIDER,
                message=f"GitLab API request failed: {redact_text(str(exc))}",
            ) from exc

        if response.status_code != 200:
            raise NetworkError(
                provider=self._PROVIDER,
                message=f"GitLab API returned an error for {url}",
                status_code=response.status_code,
                body=redact_text(response.text[:_BODY_SNIPPET_LIMIT]) or "unknown error",
            )
        return response
