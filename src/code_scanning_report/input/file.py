import json
import logging
from pathlib import Path

from code_scanning_report.domain import CodeScanningAlert
from code_scanning_report.errors import AlertFileError

logger = logging.getLogger(__name__)


class JsonFileAlertInput:
    """Input adapter that reads alerts from a saved raw JSON dump.

    The file is the output of ``--format json --detail raw``: a JSON array of
    alert payloads as the code scanning API returned them.
    """

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path)

    @property
    def name(self) -> str:
        return "file"

    async def fetch(self) -> list[CodeScanningAlert]:
        if not self._file_path.exists():
            raise AlertFileError(f"Alert file not found: {self._file_path}")

        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise AlertFileError(f"Unable to read alerts from {self._file_path}: {exc}") from exc

        if not isinstance(data, list):
            raise AlertFileError(f"Expected a JSON array of alerts in {self._file_path}")

        try:
            alerts = [CodeScanningAlert.from_api(item) for item in data]
        except (KeyError, TypeError) as exc:
            raise AlertFileError(f"Malformed alert in {self._file_path}: {exc}") from exc

        logger.debug("Loaded %d alert(s) from %s", len(alerts), self._file_path)
        return alerts
