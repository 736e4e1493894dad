"""Error taxonomy for chapter extraction.

Every failure is a ChapterError subclass tagged with a short ``kind`` so
callers can branch on the failure class separately from its message text.
Only the outer boundaries (HTTP routes, CLI) turn these into plain strings.
"""

from typing import Optional


class ChapterError(Exception):
    """Base class for all chapter extraction failures."""

    kind = "error"


class SpawnError(ChapterError):
    """The probe executable could not be launched."""

    kind = "spawn"


class ProcessError(ChapterError):
    """The probe ran but exited with a non-zero status."""

    kind = "process"

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ProbeTimeoutError(ProcessError):
    """The probe did not exit within the configured timeout and was killed."""

    kind = "timeout"

    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout


class EncodingError(ChapterError):
    """Probe output was not valid UTF-8."""

    kind = "encoding"


class ParseError(ChapterError):
    """Probe output was not valid JSON."""

    kind = "parse"
