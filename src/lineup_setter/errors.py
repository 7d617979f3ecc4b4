"""Exception types raised by the lineup setter."""

from typing import Iterable, Optional


class LineupSetterError(Exception):
    """Base class for lineup setter failures."""
    pass


class RosterValidationError(LineupSetterError, ValueError):
    """Raised when a player pool cannot be partitioned into a lineup."""

    def __init__(self, message: str, duplicate_ids: Iterable[str] = ()):
        super().__init__(message)
        self.duplicate_ids = list(duplicate_ids)


class RosterSourceError(LineupSetterError):
    """Raised when a roster source cannot be read at all."""
    pass


class LineupSubmissionError(LineupSetterError):
    """Raised when the league host rejects a lineup transaction."""

    def __init__(self, message: str, status_code: Optional[int] = None, response_text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class SubmissionNotAllowedError(LineupSetterError):
    """Raised when settings forbid sending a lineup to the league host."""
    pass
