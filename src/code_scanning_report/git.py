"""Repository detection from the local git checkout's remotes."""

import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

from code_scanning_report.api import Repository
from code_scanning_report.errors import RepositoryResolutionError

logger = logging.getLogger(__name__)

_URL_PATTERN = re.compile(r"github\.com[:/](?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")
_SHORTHAND_PATTERN = re.compile(r"^(?P<owner>[^/:@\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?$")


@dataclass(frozen=True, slots=True)
class GitRemote:
    name: str
    fetch_url: str | None = None
    push_url: str | None = None


def parse_github_url(url: str) -> Repository | None:
    """Extract owner and repository name from a GitHub remote URL.

    Accepts HTTPS, SSH and git:// URLs with or without ``.git``. Returns None
    when the URL does not point at github.com.
    """
    match = _URL_PATTERN.search(url.strip())
    if match is None:
        return None
    return Repository(owner=match.group("owner"), name=match.group("repo"))


def parse_repository_name(value: str) -> Repository | None:
    """Parse a user-supplied ``owner/repo`` shorthand or GitHub URL."""
    match = _SHORTHAND_PATTERN.search(value.strip())
    if match is None:
        return parse_github_url(value)
    return Repository(owner=match.group("owner"), name=match.group("repo"))


def parse_remotes(output: str) -> list[GitRemote]:
    """Parse ``git remote -v`` output, preserving the order remotes appear in."""
    urls: dict[str, dict[str, str]] = {}
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        name, url = parts[0], parts[1]
        kind = parts[2].strip("()") if len(parts) > 2 else "fetch"
        urls.setdefault(name, {})[kind] = url

    return [
        GitRemote(name=name, fetch_url=refs.get("fetch"), push_url=refs.get("push"))
        for name, refs in urls.items()
    ]


def list_remotes(cwd: str | Path | None = None) -> list[GitRemote]:
    try:
        result = subprocess.run(
            ["git", "remote", "-v"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=10,
        )
    except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as exc:
        raise RepositoryResolutionError(
            "Failed to get git remote information. Make sure you are in a git repository."
        ) from exc
    return parse_remotes(result.stdout)


def detect_repository(cwd: str | Path | None = None) -> Repository:
    """Resolve the GitHub repository for a checkout, preferring ``origin``."""
    remotes = list_remotes(cwd)
    if not remotes:
        raise RepositoryResolutionError(
            "No git remotes found. Make sure you are in a git repository."
        )

    remote = next((r for r in remotes if r.name == "origin"), None)
    if remote is None:
        remote = remotes[0]
        logger.warning("No 'origin' remote, using '%s'", remote.name)

    url = remote.fetch_url or remote.push_url
    if not url:
        raise RepositoryResolutionError("No valid remote URL found.")

    repository = parse_github_url(url)
    if repository is None:
        raise RepositoryResolutionError(
            f"Unable to parse GitHub repository from remote URL: {url}"
        )
    return repository
