from code_scanning_report.errors import ReportError


class CodeScanningAPIError(ReportError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(CodeScanningAPIError):
    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: float | None = None,
        status_code: int | None = 429,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.retry_after = retry_after


class AuthenticationError(CodeScanningAPIError):
    pass


class ForbiddenError(CodeScanningAPIError):
    pass


class NotFoundError(CodeScanningAPIError):
    pass
