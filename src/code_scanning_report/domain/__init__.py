"""Domain models for code scanning alerts and detail-level projection."""

from code_scanning_report.domain.models import (
    AlertInstance,
    CodeScanningAlert,
    DetailLevel,
    FullAlert,
    Location,
    MediumAlert,
    MinimumAlert,
    ProjectedAlert,
    Rule,
    Tool,
)
from code_scanning_report.domain.projection import project_alert

__all__ = [
    "AlertInstance",
    "CodeScanningAlert",
    "DetailLevel",
    "FullAlert",
    "Location",
    "MediumAlert",
    "MinimumAlert",
    "ProjectedAlert",
    "Rule",
    "Tool",
    "project_alert",
]
