__version__ = "0.1.0"

from code_scanning_report.api import CodeScanningClient, Repository
from code_scanning_report.core import ReportPipeline, ReportResult
from code_scanning_report.domain import (
    CodeScanningAlert,
    DetailLevel,
    FullAlert,
    MediumAlert,
    MinimumAlert,
    project_alert,
)
from code_scanning_report.errors import ReportError
from code_scanning_report.formatters import (
    FormatterRegistry,
    JsonFormatter,
    MarkdownFormatter,
    ReportFormatter,
    SarifFormatter,
    TextFormatter,
    default_registry,
)
from code_scanning_report.input import AlertInput, GitHubAlertInput, JsonFileAlertInput, ManualInput
from code_scanning_report.output import ConsoleReportOutput, FileReportOutput, ReportOutput

__all__ = [
    "__version__",
    "ReportPipeline",
    "ReportResult",
    "CodeScanningAlert",
    "DetailLevel",
    "MinimumAlert",
    "MediumAlert",
    "FullAlert",
    "project_alert",
    "ReportError",
    "CodeScanningClient",
    "Repository",
    "AlertInput",
    "GitHubAlertInput",
    "JsonFileAlertInput",
    "ManualInput",
    "ReportFormatter",
    "FormatterRegistry",
    "default_registry",
    "JsonFormatter",
    "MarkdownFormatter",
    "SarifFormatter",
    "TextFormatter",
    "ReportOutput",
    "ConsoleReportOutput",
    "FileReportOutput",
]
