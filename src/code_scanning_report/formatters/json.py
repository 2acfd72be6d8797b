import json
from collections.abc import Sequence

from code_scanning_report.domain import CodeScanningAlert, DetailLevel, project_alert


class JsonFormatter:
    """Serializes projected alerts as an indented JSON array."""

    @property
    def name(self) -> str:
        return "json"

    @property
    def extension(self) -> str:
        return "json"

    def format(
        self,
        alerts: Sequence[CodeScanningAlert],
        detail_level: DetailLevel = DetailLevel.MEDIUM,
        repo_name: str = "",
    ) -> str:
        projected = [project_alert(alert, detail_level).to_dict() for alert in alerts]
        return json.dumps(projected, indent=2, ensure_ascii=False)
