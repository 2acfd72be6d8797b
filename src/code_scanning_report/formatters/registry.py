from code_scanning_report.formatters.base import ReportFormatter
from code_scanning_report.formatters.json import JsonFormatter
from code_scanning_report.formatters.markdown import MarkdownFormatter
from code_scanning_report.formatters.sarif import SarifFormatter
from code_scanning_report.formatters.text import TextFormatter


class UnknownFormatError(KeyError):
    pass


class FormatterRegistry:
    """Registry of report formatters keyed by format name."""

    def __init__(self) -> None:
        self._formatters: dict[str, ReportFormatter] = {}

    def register(self, formatter: ReportFormatter) -> None:
        self._formatters[formatter.name] = formatter

    def get(self, name: str) -> ReportFormatter:
        try:
            return self._formatters[name]
        except KeyError:
            raise UnknownFormatError(f"Unsupported format: {name}") from None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._formatters)


def default_registry() -> FormatterRegistry:
    registry = FormatterRegistry()
    registry.register(JsonFormatter())
    registry.register(SarifFormatter())
    registry.register(TextFormatter())
    registry.register(MarkdownFormatter())
    return registry
