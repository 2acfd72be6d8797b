from code_scanning_report.output.base import ReportOutput
from code_scanning_report.output.console import ConsoleReportOutput
from code_scanning_report.output.file import FileReportOutput

__all__ = ["ReportOutput", "ConsoleReportOutput", "FileReportOutput"]
