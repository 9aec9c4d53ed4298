"""Errors raised while setting up the Docker deployment"""

from typing import List, Optional


class SetupError(RuntimeError):
    """Fatal setup failure carrying the lines to show the operator"""

    def __init__(self, message: str, hints: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.hints = hints or []


class PreflightError(SetupError):
    """A required executable or path is missing or unusable"""


class ComposeError(SetupError):
    """The compose build/run call failed"""

    def __init__(self, message: str, returncode: int, hints: Optional[List[str]] = None):
        super().__init__(message, hints)
        self.returncode = returncode
