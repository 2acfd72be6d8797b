class ReportError(Exception):
    pass


class CredentialsNotFoundError(ReportError):
    pass


class RepositoryResolutionError(ReportError):
    pass


class AlertFileError(ReportError):
    pass


class ReportWriteError(ReportError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
