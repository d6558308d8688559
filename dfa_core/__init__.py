"""
DFA engine: build deterministic finite automata from a text description,
run words through them and render their formal definition.
Centralized exports for all core functionality.
"""

from .errors import (
    DFAError,
    MissingStateError,
    UnknownTransitionTargetError,
    MalformedLineError,
    DuplicateStateError,
    DuplicateSymbolError,
    DuplicateTransitionError,
    InvalidAutomatonError,
)

from .models import DFA, State, RunResult

from .builder import DFABuilder

from .spec_parser import SpecParser, get_parser, parse_spec

from .engine import run, accepts, run_many

from .presentation import (
    format_states,
    format_alphabet,
    format_start_state,
    format_accept_states,
    format_transitions,
    format_tuple,
    format_verdict,
    to_spec_text,
    to_dot,
)

from .interactive import InteractiveBuilder

__all__ = [
    # Errors
    "DFAError",
    "MissingStateError",
    "UnknownTransitionTargetError",
    "MalformedLineError",
    "DuplicateStateError",
    "DuplicateSymbolError",
    "DuplicateTransitionError",
    "InvalidAutomatonError",
    # Models
    "DFA",
    "State",
    "RunResult",
    "DFABuilder",
    # Parser
    "SpecParser",
    "get_parser",
    "parse_spec",
    # Engine
    "run",
    "accepts",
    "run_many",
    # Presentation
    "format_states",
    "format_alphabet",
    "format_start_state",
    "format_accept_states",
    "format_transitions",
    "format_tuple",
    "format_verdict",
    "to_spec_text",
    "to_dot",
    # Interactive
    "InteractiveBuilder",
]
