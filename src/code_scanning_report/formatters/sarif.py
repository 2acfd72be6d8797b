import json
from collections.abc import Sequence
from typing import Any, Literal

from code_scanning_report.domain import (
    CodeScanningAlert,
    DetailLevel,
    FullAlert,
    MediumAlert,
    MinimumAlert,
    project_alert,
)

SarifLevel = Literal["error", "warning", "note"]

SARIF_SCHEMA = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"
)
SARIF_VERSION = "2.1.0"

_SEVERITY_LEVELS: dict[str, SarifLevel] = {
    "error": "error",
    "critical": "error",
    "warning": "warning",
    "medium": "warning",
}


def map_severity_to_level(severity: str) -> SarifLevel:
    """Map a free-text rule severity to a SARIF result level, ignoring case."""
    return _SEVERITY_LEVELS.get(severity.lower(), "note")


class SarifFormatter:
    """SARIF 2.1.0 log with a single run and one result per alert.

    The raw detail level is emitted as a plain JSON array since an
    unprocessed API dump has no place in the SARIF envelope.
    """

    TOOL_NAME = "CodeQL"
    DEFAULT_TOOL_VERSION = "1.0.0"

    @property
    def name(self) -> str:
        return "sarif"

    @property
    def extension(self) -> str:
        return "sarif"

    def format(
        self,
        alerts: Sequence[CodeScanningAlert],
        detail_level: DetailLevel = DetailLevel.MEDIUM,
        repo_name: str = "",
    ) -> str:
        if detail_level == DetailLevel.RAW:
            return json.dumps([alert.to_dict() for alert in alerts], indent=2, ensure_ascii=False)

        results: list[dict[str, Any]] = []
        for alert in alerts:
            projected = project_alert(alert, detail_level)
            if isinstance(projected, MinimumAlert):
                results.append(self._build_result(projected))

        log = {
            "$schema": SARIF_SCHEMA,
            "version": SARIF_VERSION,
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": self.TOOL_NAME,
                            "version": self._tool_version(alerts, detail_level),
                        }
                    },
                    "results": results,
                }
            ],
        }
        return json.dumps(log, indent=2, ensure_ascii=False)

    def _tool_version(self, alerts: Sequence[CodeScanningAlert], detail_level: DetailLevel) -> str:
        if detail_level == DetailLevel.FULL and alerts:
            projected = project_alert(alerts[0], DetailLevel.FULL)
            if isinstance(projected, FullAlert) and projected.tool_version:
                return projected.tool_version
        return self.DEFAULT_TOOL_VERSION

    @staticmethod
    def _build_result(alert: MinimumAlert) -> dict[str, Any]:
        # SARIF regions need a column; minimum projections do not carry one.
        start_column = alert.start_column if isinstance(alert, MediumAlert) else 1
        return {
            "ruleId": alert.rule_id,
            "level": map_severity_to_level(alert.severity),
            "message": {"text": alert.message},
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": alert.file_path},
                        "region": {
                            "startLine": alert.start_line,
                            "startColumn": start_column,
                        },
                    }
                }
            ],
        }
