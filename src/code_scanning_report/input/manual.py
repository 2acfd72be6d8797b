from typing import Sequence

from code_scanning_report.domain import CodeScanningAlert


class ManualInput:
    """Manual input source for programmatically supplying alerts."""

    def __init__(self, alerts: Sequence[CodeScanningAlert]) -> None:
        self._alerts: tuple[CodeScanningAlert, ...] = tuple(alerts)

    @property
    def name(self) -> str:
        return "manual"

    async def fetch(self) -> list[CodeScanningAlert]:
        return list(self._alerts)
