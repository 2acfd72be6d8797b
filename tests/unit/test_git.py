import subprocess
from unittest.mock import MagicMock, patch

import pytest

from code_scanning_report.api import Repository
from code_scanning_report.errors import RepositoryResolutionError
from code_scanning_report.git import (
    GitRemote,
    detect_repository,
    parse_github_url,
    parse_remotes,
    parse_repository_name,
)


class TestParseGitHubUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/octo/app.git",
            "https://github.com/octo/app",
            "https://github.com/octo/app/",
            "git@github.com:octo/app.git",
            "git://github.com/octo/app.git",
            "ssh://git@github.com/octo/app.git",
        ],
    )
    def test_parses_supported_formats(self, url) -> None:
        assert parse_github_url(url) == Repository(owner="octo", name="app")

    def test_keeps_dots_inside_repository_name(self) -> None:
        assert parse_github_url("https://github.com/octo/app.js.git") == Repository(
            "octo", "app.js"
        )

    @pytest.mark.parametrize(
        "url",
        ["https://gitlab.com/octo/app.git", "not-a-url", "", "https://github.com/octo", "octo/app"],
    )
    def test_returns_none_for_unsupported_urls(self, url) -> None:
        assert parse_github_url(url) is None


class TestParseRepositoryName:
    @pytest.mark.parametrize(
        "value",
        ["octo/app", "octo/app.git", " octo/app ", "https://github.com/octo/app.git"],
    )
    def test_accepts_shorthand_and_urls(self, value) -> None:
        assert parse_repository_name(value) == Repository(owner="octo", name="app")

    @pytest.mark.parametrize("value", ["octo", "https://gitlab.com/octo/app", "a/b/c"])
    def test_rejects_other_values(self, value) -> None:
        assert parse_repository_name(value) is None


class TestParseRemotes:
    def test_groups_fetch_and_push_urls(self) -> None:
        output = (
            "origin\tgit@github.com:octo/app.git (fetch)\n"
            "origin\tgit@github.com:octo/app.git (push)\n"
            "upstream\thttps://github.com/acme/app.git (fetch)\n"
        )

        assert parse_remotes(output) == [
            GitRemote("origin", "git@github.com:octo/app.git", "git@github.com:octo/app.git"),
            GitRemote("upstream", "https://github.com/acme/app.git", None),
        ]

    def test_empty_output(self) -> None:
        assert parse_remotes("") == []


def completed(stdout: str) -> MagicMock:
    result = MagicMock()
    result.stdout = stdout
    return result


class TestDetectRepository:
    def test_prefers_origin(self) -> None:
        output = (
            "upstream\thttps://github.com/acme/app.git (fetch)\n"
            "origin\thttps://github.com/octo/app.git (fetch)\n"
        )
        with patch("subprocess.run", return_value=completed(output)) as mock_run:
            repository = detect_repository()

        assert repository == Repository("octo", "app")
        assert mock_run.call_args.args[0] == ["git", "remote", "-v"]

    def test_falls_back_to_first_remote(self) -> None:
        output = "upstream\thttps://github.com/acme/app.git (fetch)\n"
        with patch("subprocess.run", return_value=completed(output)):
            assert detect_repository() == Repository("acme", "app")

    def test_uses_push_url_without_fetch_url(self) -> None:
        output = "origin\tgit@github.com:octo/app.git (push)\n"
        with patch("subprocess.run", return_value=completed(output)):
            assert detect_repository() == Repository("octo", "app")

    def test_raises_without_remotes(self) -> None:
        with patch("subprocess.run", return_value=completed("")):
            with pytest.raises(RepositoryResolutionError, match="No git remotes found"):
                detect_repository()

    def test_raises_for_non_github_remote(self) -> None:
        output = "origin\thttps://gitlab.com/octo/app.git (fetch)\n"
        with patch("subprocess.run", return_value=completed(output)):
            with pytest.raises(RepositoryResolutionError, match="Unable to parse"):
                detect_repository()

    def test_raises_outside_git_repository(self) -> None:
        error = subprocess.CalledProcessError(128, ["git", "remote", "-v"])
        with patch("subprocess.run", side_effect=error):
            with pytest.raises(RepositoryResolutionError, match="git repository"):
                detect_repository()

    def test_raises_when_git_is_missing(self) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(RepositoryResolutionError):
                detect_repository()

    def test_local_path_remote_is_not_a_github_repository(self) -> None:
        output = "origin\tmirrors/app (fetch)\n"
        with patch("subprocess.run", return_value=completed(output)):
            with pytest.raises(RepositoryResolutionError, match="Unable to parse"):
                detect_repository()
