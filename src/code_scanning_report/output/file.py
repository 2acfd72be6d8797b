import logging
from pathlib import Path

from code_scanning_report.errors import ReportWriteError

logger = logging.getLogger(__name__)


class FileReportOutput:
    """Writes the report to a UTF-8 file. Parent directories must exist."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        return "file"

    @property
    def path(self) -> Path:
        return self._path

    def write(self, content: str) -> str:
        try:
            self._path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ReportWriteError(
                f"Unable to write report to {self._path}: {exc.strerror or exc}",
                path=str(self._path),
            ) from exc

        logger.debug("Wrote %d characters to %s", len(content), self._path)
        return str(self._path)
