"""Runtime configuration: credentials, API endpoint and report options."""

import logging
import os
import re
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from code_scanning_report.domain import DetailLevel
from code_scanning_report.errors import CredentialsNotFoundError

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "GITHUB_TOKEN"
API_URL_ENV_VAR = "GITHUB_API_URL"
DEFAULT_API_URL = "https://api.github.com"
REPORT_FORMATS = ("json", "sarif", "txt", "md")
STDOUT_PATH = "-"


def resolve_github_token(env: Mapping[str, str] | None = None) -> str:
    """Return a GitHub token from ``GITHUB_TOKEN`` or the ``gh`` CLI.

    Raises:
        CredentialsNotFoundError: If neither source yields a token.
    """
    env = os.environ if env is None else env
    token = env.get(TOKEN_ENV_VAR)
    if token:
        return token

    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            check=True,
            timeout=10,
        )
        token = result.stdout.strip()
        if token:
            return token
    except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as exc:
        logger.debug("gh CLI token lookup failed: %s", exc)

    raise CredentialsNotFoundError(
        "GitHub token not found. Please set GITHUB_TOKEN environment variable "
        "or authenticate with `gh auth login`"
    )


def generated_timestamp(moment: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a trailing ``Z``."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def report_timestamp(moment: datetime) -> str:
    return re.sub(r"[:.T]", "-", generated_timestamp(moment))


def default_output_path(report_format: str, moment: datetime | None = None) -> Path:
    """``code-scanning-report-<timestamp>.<format>`` in the working directory."""
    moment = moment or datetime.now(UTC)
    return Path(f"code-scanning-report-{report_timestamp(moment)}.{report_format}")


@dataclass(frozen=True, slots=True)
class ReportConfig:
    report_format: str = "json"
    detail_level: DetailLevel = DetailLevel.MEDIUM
    output_path: str | None = None
    repository: str | None = None
    input_file: Path | None = None
    api_url: str = DEFAULT_API_URL
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.report_format not in REPORT_FORMATS:
            raise ValueError(f"Unsupported format: {self.report_format}")

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, **options: object
    ) -> "ReportConfig":
        """Build a config from CLI options, filling the API URL from the environment."""
        env = os.environ if env is None else env
        options.setdefault("api_url", env.get(API_URL_ENV_VAR) or DEFAULT_API_URL)
        return cls(**options)  # type: ignore[arg-type]

    @property
    def writes_to_stdout(self) -> bool:
        return self.output_path == STDOUT_PATH

    def resolve_output_path(self, moment: datetime | None = None) -> Path:
        if self.output_path:
            return Path(self.output_path)
        return default_output_path(self.report_format, moment)
