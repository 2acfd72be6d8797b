from code_scanning_report.api import CodeScanningClient, Repository
from code_scanning_report.domain import CodeScanningAlert


class GitHubAlertInput:
    """AlertInput adapter for a repository's open code scanning alerts.

    Usage:
        client = CodeScanningClient(access_token="...")
        source = GitHubAlertInput(client, Repository("octo", "app"))
        alerts = await source.fetch()
    """

    def __init__(
        self,
        client: CodeScanningClient,
        repository: Repository,
        state: str = "open",
    ) -> None:
        self._client = client
        self._repository = repository
        self._state = state

    @property
    def name(self) -> str:
        return "github"

    @property
    def repository(self) -> Repository:
        return self._repository

    async def fetch(self) -> list[CodeScanningAlert]:
        async with self._client as client:
            return await client.list_alerts_with_details(self._repository, state=self._state)
