from collections.abc import Callable
from typing import Any

import pytest

from code_scanning_report.domain import CodeScanningAlert


def build_payload(
    number: int = 1,
    rule_id: str = "js/sql-injection",
    rule_name: str = "Database query built from user-controlled sources",
    severity: str = "error",
    description: str = "SQL injection vulnerability",
    path: str = "src/database.js",
    start_line: int = 10,
    end_line: int = 12,
    start_column: int = 5,
    end_column: int = 42,
    message: str = "This query depends on a user-provided value.",
    state: str = "open",
    commit_sha: str = "abc123def456",
    ref: str = "refs/heads/main",
    tool_version: str | None = "2.15.0",
    help: str | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "number": number,
        "rule": {
            "id": rule_id,
            "severity": severity,
            "description": description,
            "name": rule_name,
        },
        "most_recent_instance": {
            "ref": ref,
            "analysis_key": ".github/workflows/codeql.yml:analyze",
            "category": ".github/workflows/codeql.yml:analyze/language:javascript",
            "state": state,
            "commit_sha": commit_sha,
            "message": {"text": message},
            "location": {
                "path": path,
                "start_line": start_line,
                "end_line": end_line,
                "start_column": start_column,
                "end_column": end_column,
            },
        },
        "tool": {"name": "CodeQL", "version": tool_version},
    }
    if help is not None:
        payload["help"] = help
    return payload


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    return build_payload


@pytest.fixture
def make_alert() -> Callable[..., CodeScanningAlert]:
    def factory(**overrides: Any) -> CodeScanningAlert:
        return CodeScanningAlert.from_api(build_payload(**overrides))

    return factory
