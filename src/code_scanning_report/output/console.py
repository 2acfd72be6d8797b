import sys
from typing import TextIO


class ConsoleReportOutput:
    """Console output adapter, used for ``--output -``."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def name(self) -> str:
        return "console"

    def write(self, content: str) -> str:
        stream = self._stream or sys.stdout
        stream.write(content)
        if not content.endswith("\n"):
            stream.write("\n")
        stream.flush()
        return "stdout"
