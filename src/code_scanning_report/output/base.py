from typing import Protocol, runtime_checkable


@runtime_checkable
class ReportOutput(Protocol):
    """Protocol for report destinations."""

    @property
    def name(self) -> str:
        ...

    def write(self, content: str) -> str:
        """Deliver the report and return a description of where it went."""
        ...
