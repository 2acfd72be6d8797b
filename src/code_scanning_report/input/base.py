from typing import Protocol, runtime_checkable

from code_scanning_report.domain import CodeScanningAlert


@runtime_checkable
class AlertInput(Protocol):
    """Protocol for sources of code scanning alerts."""

    @property
    def name(self) -> str:
        ...

    async def fetch(self) -> list[CodeScanningAlert]:
        ...
