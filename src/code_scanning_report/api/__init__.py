from code_scanning_report.api.client import CodeScanningClient
from code_scanning_report.api.exceptions import (
    AuthenticationError,
    CodeScanningAPIError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
)
from code_scanning_report.api.models import Repository

__all__ = [
    "CodeScanningClient",
    "Repository",
    "CodeScanningAPIError",
    "RateLimitError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
]
