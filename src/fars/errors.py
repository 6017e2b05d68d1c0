"""Exception types raised by the FARS package.

Missing input files surface as the builtin ``FileNotFoundError``; only the
errors with no builtin counterpart are defined here.
"""


class FarsError(Exception):
    """Base class for FARS-specific errors."""


class InvalidInput(FarsError, ValueError):
    """A year or state code could not be parsed as an integer."""


class InvalidState(FarsError, ValueError):
    """The requested state code does not occur in the loaded dataset."""

    def __init__(self, state_code: int) -> None:
        super().__init__(f"invalid STATE number: {state_code}")
        self.state_code = state_code
