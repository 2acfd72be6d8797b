import logging
from dataclasses import dataclass

from code_scanning_report.domain import DetailLevel
from code_scanning_report.formatters import ReportFormatter
from code_scanning_report.input import AlertInput
from code_scanning_report.output import ReportOutput

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportResult:
    alert_count: int
    destination: str | None = None


class ReportPipeline:
    def __init__(
        self,
        input_source: AlertInput,
        formatter: ReportFormatter,
        output: ReportOutput,
        detail_level: DetailLevel = DetailLevel.MEDIUM,
        repo_name: str = "",
    ) -> None:
        self._input = input_source
        self._formatter = formatter
        self._output = output
        self._detail_level = detail_level
        self._repo_name = repo_name

    async def run(self) -> ReportResult:
        alerts = await self._input.fetch()
        logger.debug("Source %s returned %d alert(s)", self._input.name, len(alerts))

        if not alerts:
            return ReportResult(alert_count=0)

        logger.debug(
            "Formatting with %s at %s detail", self._formatter.name, self._detail_level
        )
        content = self._formatter.format(alerts, self._detail_level, self._repo_name)
        destination = self._output.write(content)
        return ReportResult(alert_count=len(alerts), destination=destination)
