from code_scanning_report.formatters.base import ReportFormatter
from code_scanning_report.formatters.json import JsonFormatter
from code_scanning_report.formatters.markdown import MarkdownFormatter, format_markdown_table
from code_scanning_report.formatters.registry import (
    FormatterRegistry,
    UnknownFormatError,
    default_registry,
)
from code_scanning_report.formatters.sarif import SarifFormatter, map_severity_to_level
from code_scanning_report.formatters.text import TextFormatter

__all__ = [
    "ReportFormatter",
    "FormatterRegistry",
    "UnknownFormatError",
    "default_registry",
    "JsonFormatter",
    "MarkdownFormatter",
    "SarifFormatter",
    "TextFormatter",
    "format_markdown_table",
    "map_severity_to_level",
]
