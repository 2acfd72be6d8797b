from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from code_scanning_report.domain import CodeScanningAlert, DetailLevel


@runtime_checkable
class ReportFormatter(Protocol):
    """Protocol for report encoders."""

    @property
    def name(self) -> str:
        ...

    @property
    def extension(self) -> str:
        ...

    def format(
        self,
        alerts: Sequence[CodeScanningAlert],
        detail_level: DetailLevel = DetailLevel.MEDIUM,
        repo_name: str = "",
    ) -> str:
        ...
