import asyncio
import logging
from typing import Any

import httpx

from code_scanning_report.api.exceptions import (
    AuthenticationError,
    CodeScanningAPIError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
)
from code_scanning_report.api.models import Repository
from code_scanning_report.domain import CodeScanningAlert

logger = logging.getLogger(__name__)


class CodeScanningClient:
    """Client for the GitHub code scanning REST API.

    Listing pages through ``/repos/{owner}/{repo}/code-scanning/alerts`` until
    a page comes back with fewer than ``PER_PAGE`` items. Failed calls are
    not retried.
    """

    BASE_URL = "https://api.github.com"
    API_VERSION = "2022-11-28"
    PER_PAGE = 100

    def __init__(
        self,
        access_token: str,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.access_token = access_token
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "CodeScanningClient":
        self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        url = f"{self.base_url}{endpoint}"
        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
        }

        try:
            response = await self._client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            raise CodeScanningAPIError(f"Request to {url} failed: {exc}") from exc

        status = response.status_code
        if status == 401:
            raise AuthenticationError("Invalid or expired GitHub token", status_code=status)

        if status == 429 or (
            status == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "GitHub API rate limit exceeded",
                retry_after=float(retry_after) if retry_after else None,
                status_code=status,
            )

        if status == 403:
            raise ForbiddenError(
                "Access denied. The token may lack the security_events scope",
                status_code=status,
            )

        if status == 404:
            raise NotFoundError(
                "Repository not found or code scanning is not enabled", status_code=status
            )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CodeScanningAPIError(
                f"GitHub API returned status {status}", status_code=status
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CodeScanningAPIError(
                f"Invalid JSON from {url}: {exc}", status_code=status
            ) from exc

    async def list_alerts(self, repository: Repository, state: str = "open") -> list[dict[str, Any]]:
        """Fetch every alert summary for a repository, one page at a time."""
        endpoint = f"/repos/{repository.owner}/{repository.name}/code-scanning/alerts"
        alerts: list[dict[str, Any]] = []
        page = 1

        while True:
            data = await self._get(
                endpoint, params={"state": state, "per_page": self.PER_PAGE, "page": page}
            )
            if not isinstance(data, list) or not all(
                isinstance(item, dict) and "number" in item for item in data
            ):
                raise CodeScanningAPIError(
                    f"Malformed alert listing on page {page} for {repository}"
                )
            logger.debug("Fetched page %d with %d alert(s) for %s", page, len(data), repository)

            if not data:
                break

            alerts.extend(data)

            if len(data) < self.PER_PAGE:
                break

            page += 1

        return alerts

    async def get_alert(self, repository: Repository, number: int) -> CodeScanningAlert:
        data = await self._get(
            f"/repos/{repository.owner}/{repository.name}/code-scanning/alerts/{number}"
        )
        try:
            return CodeScanningAlert.from_api(data)
        except (KeyError, TypeError) as exc:
            raise CodeScanningAPIError(f"Malformed payload for alert #{number}: {exc}") from exc

    async def list_alerts_with_details(
        self, repository: Repository, state: str = "open"
    ) -> list[CodeScanningAlert]:
        """List alerts, then fetch each one's detail record concurrently.

        Results keep the listing order. The first failed lookup cancels the
        ones still in flight and is re-raised on its own.
        """
        summaries = await self.list_alerts(repository, state=state)
        logger.debug("Fetching details for %d alert(s)", len(summaries))
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self.get_alert(repository, summary["number"]))
                    for summary in summaries
                ]
        except ExceptionGroup as failures:
            raise failures.exceptions[0]
        return [task.result() for task in tasks]
