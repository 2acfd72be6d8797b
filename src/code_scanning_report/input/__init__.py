from code_scanning_report.input.base import AlertInput
from code_scanning_report.input.file import JsonFileAlertInput
from code_scanning_report.input.github import GitHubAlertInput
from code_scanning_report.input.manual import ManualInput

__all__ = [
    "AlertInput",
    "GitHubAlertInput",
    "JsonFileAlertInput",
    "ManualInput",
]
