from code_scanning_report.core.pipeline import ReportPipeline, ReportResult

__all__ = ["ReportPipeline", "ReportResult"]
