"""
Error taxonomy for the DFA engine.

Every structural problem found while building an automaton is raised as a
subclass of DFAError. Parse-time errors are annotated with the offending
line so callers can report a single clear failure.

Rejections found while *running* a word are not errors; see RunResult.
"""

from typing import Optional


class DFAError(ValueError):
    """Base class for construction and parse failures."""

    def __init__(self, message: str, line_no: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line_no = line_no
        self.line = line

    def at_line(self, line_no: int, line: str) -> "DFAError":
        """Attach source position and return self, for re-raising."""
        self.line_no = line_no
        self.line = line
        return self

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message} ({self.line!r})"


class MissingStateError(DFAError):
    """A referenced state name was never declared."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"state '{name}' does not exist", **kwargs)
        self.name = name


class UnknownTransitionTargetError(DFAError):
    """The destination of a transition was never declared."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"transition target state '{name}' does not exist", **kwargs)
        self.name = name


class MalformedLineError(DFAError):
    pass


class DuplicateStateError(DFAError):
    def __init__(self, name: str, **kwargs):
        super().__init__(f"state '{name}' is already defined", **kwargs)
        self.name = name


class DuplicateSymbolError(DFAError):
    def __init__(self, symbol: str, **kwargs):
        super().__init__(f"symbol '{symbol}' is already in the alphabet", **kwargs)
        self.symbol = symbol


class DuplicateTransitionError(DFAError):
    """A second, different destination for an existing (state, symbol) pair."""

    def __init__(self, state: str, symbol: str, existing: str, requested: str, **kwargs):
        super().__init__(
            f"state '{state}' already moves to '{existing}' on '{symbol}', "
            f"cannot also move to '{requested}'",
            **kwargs,
        )
        self.state = state
        self.symbol = symbol


class InvalidAutomatonError(DFAError):
    """The final invariant check on a finished automaton failed."""
    pass
