import json
from collections import Counter
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from code_scanning_report.config import generated_timestamp
from code_scanning_report.domain import (
    CodeScanningAlert,
    DetailLevel,
    FullAlert,
    MediumAlert,
    MinimumAlert,
    project_alert,
)


def format_markdown_table(data: Sequence[Sequence[str]]) -> str:
    """Render a Markdown table from rows of cells, the first row being headers.

    Data rows may be shorter than the header row; missing cells render empty.
    """
    if not data:
        return ""

    headers, *rows = data
    widths = [
        max([len(header), *(len(row[i]) if i < len(row) else 0 for row in rows)])
        for i, header in enumerate(headers)
    ]

    def render_row(cells: Sequence[str]) -> str:
        padded = [
            (cells[i] if i < len(cells) else "").ljust(width) for i, width in enumerate(widths)
        ]
        return f"| {' | '.join(padded)} |"

    lines = [render_row(headers), f"| {' | '.join('-' * width for width in widths)} |"]
    lines.extend(render_row(row) for row in rows)
    return "\n".join(lines)


class MarkdownFormatter:
    """Markdown report with a severity summary table and one section per alert."""

    TITLE = "CodeQL Security Scan Report"

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    @property
    def name(self) -> str:
        return "md"

    @property
    def extension(self) -> str:
        return "md"

    def format(
        self,
        alerts: Sequence[CodeScanningAlert],
        detail_level: DetailLevel = DetailLevel.MEDIUM,
        repo_name: str = "",
    ) -> str:
        lines: list[str] = [
            f"# {self.TITLE}",
            "",
            f"**Repository:** {repo_name}",
            f"**Total Alerts:** {len(alerts)}",
            f"**Detail Level:** {detail_level}",
            f"**Generated:** {generated_timestamp(self._clock())}",
            "",
            "---",
            "",
            "## Summary by Severity",
            "",
            format_markdown_table(self._severity_summary(alerts)),
            "",
            "## Detailed Alerts",
            "",
        ]

        for alert in alerts:
            projected = project_alert(alert, detail_level)

            if isinstance(projected, MinimumAlert):
                lines.extend(self._render_alert(projected))
            else:
                lines.append("```json")
                lines.append(json.dumps(projected.to_dict(), indent=2, ensure_ascii=False))
                lines.append("```")

            lines.extend(["", "---", ""])

        return "\n".join(lines)

    @staticmethod
    def _severity_summary(alerts: Sequence[CodeScanningAlert]) -> list[list[str]]:
        counts = Counter(alert.rule.severity.lower() for alert in alerts)
        return [["Severity", "Count"], *([severity, str(count)] for severity, count in counts.items())]

    def _render_alert(self, alert: MinimumAlert) -> list[str]:
        lines = [
            f"### Alert #{alert.number}: {alert.rule_name}",
            "",
            f"**Rule ID:** `{alert.rule_id}`",
            f"**Severity:** {alert.severity}",
        ]
        if isinstance(alert, MediumAlert):
            lines.append(f"**Description:** {alert.rule_description}")

        lines.extend(
            [
                "",
                "#### Location",
                "",
                f"- **File:** `{alert.file_path}`",
                f"- **Lines:** {alert.start_line}-{alert.end_line}",
            ]
        )
        if isinstance(alert, MediumAlert):
            lines.append(f"- **Columns:** {alert.start_column}-{alert.end_column}")

        lines.extend(
            [
                "",
                "#### Message",
                "",
                alert.message,
                "",
                "#### Details",
                "",
                f"- **Commit:** `{alert.commit_sha}`",
            ]
        )
        if isinstance(alert, MediumAlert):
            lines.append(f"- **State:** {alert.state}")
        if isinstance(alert, FullAlert):
            lines.append(f"- **Reference:** {alert.ref}")

        return lines
