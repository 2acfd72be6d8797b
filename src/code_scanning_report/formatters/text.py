import json
from collections.abc import Sequence

from code_scanning_report.domain import (
    CodeScanningAlert,
    DetailLevel,
    MediumAlert,
    MinimumAlert,
    project_alert,
)

RULE_WIDTH = 80


class TextFormatter:
    """Line-oriented plain text report."""

    TITLE = "CodeQL Security Scan Report"

    @property
    def name(self) -> str:
        return "txt"

    @property
    def extension(self) -> str:
        return "txt"

    def format(
        self,
        alerts: Sequence[CodeScanningAlert],
        detail_level: DetailLevel = DetailLevel.MEDIUM,
        repo_name: str = "",
    ) -> str:
        lines: list[str] = [
            self.TITLE,
            f"Total Alerts: {len(alerts)}",
            f"Detail Level: {detail_level}",
            "=" * RULE_WIDTH,
            "",
        ]

        for alert in alerts:
            projected = project_alert(alert, detail_level)

            if isinstance(projected, MinimumAlert):
                lines.extend(self._render_alert(projected))
            else:
                lines.append(json.dumps(projected.to_dict(), indent=2, ensure_ascii=False))

            lines.append("-" * RULE_WIDTH)
            lines.append("")

        return "\n".join(lines)

    def _render_alert(self, alert: MinimumAlert) -> list[str]:
        lines = [
            f"Alert #{alert.number}",
            f"Rule: {alert.rule_id}",
            f"Name: {alert.rule_name}",
            f"Severity: {alert.severity}",
        ]
        if isinstance(alert, MediumAlert):
            lines.append(f"Description: {alert.rule_description}")

        lines.extend(
            [
                "",
                "Location:",
                f"  File: {alert.file_path}",
                f"  Lines: {alert.start_line}-{alert.end_line}",
            ]
        )
        if isinstance(alert, MediumAlert):
            lines.append(f"  Columns: {alert.start_column}-{alert.end_column}")

        lines.extend(["", "Message:", f"  {alert.message}", "", f"Commit: {alert.commit_sha}"])
        if isinstance(alert, MediumAlert):
            lines.append(f"State: {alert.state}")

        return lines
