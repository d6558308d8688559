"""
Construction phase for DFAs.

DFABuilder is the only mutable view of an automaton: states, accept flags,
transitions and the start state are set here, then ``build()`` validates
the invariants once and hands out a frozen DFA.
"""

from typing import Dict, Iterable, List, Optional

import structlog
from pydantic import ValidationError

from .errors import (
    DFAError,
    DuplicateStateError,
    DuplicateSymbolError,
    DuplicateTransitionError,
    InvalidAutomatonError,
    MissingStateError,
    UnknownTransitionTargetError,
)
from .models import DFA, State

log = structlog.get_logger()

# Delimiters of the specification text format
RESERVED_IN_NAMES = (",", "{", "}", "(", ")", "->")


class DFABuilder:
    def __init__(self):
        self._alphabet: List[str] = []
        self._names: List[str] = []
        self._index: Dict[str, int] = {}
        self._accept: List[bool] = []
        self._transitions: List[Dict[str, int]] = []
        self._start: Optional[int] = None

    # --- Alphabet ---

    def add_symbol(self, symbol: str) -> None:
        if len(symbol) != 1:
            raise DFAError(f"symbol {symbol!r} must be a single character")
        if symbol in self._alphabet:
            raise DuplicateSymbolError(symbol)
        self._alphabet.append(symbol)

    def has_symbol(self, symbol: str) -> bool:
        return symbol in self._alphabet

    @property
    def alphabet(self) -> List[str]:
        return list(self._alphabet)

    # --- States ---

    def check_state_name(self, name: str) -> None:
        """Raise DFAError unless ``name`` can be written in specification text."""
        if not name:
            raise DFAError("state name must not be empty")
        if name != name.strip():
            raise DFAError(f"state name {name!r} has surrounding whitespace")
        for token in RESERVED_IN_NAMES:
            if token in name:
                raise DFAError(f"state name {name!r} must not contain '{token}'")

    def add_state(self, name: str, is_accept: bool = False) -> int:
        self.check_state_name(name)
        if name in self._index:
            raise DuplicateStateError(name)
        idx = len(self._names)
        self._names.append(name)
        self._index[name] = idx
        self._accept.append(is_accept)
        self._transitions.append({})
        return idx

    def has_state(self, name: str) -> bool:
        return name in self._index

    @property
    def state_names(self) -> List[str]:
        return list(self._names)

    def _require(self, name: str) -> int:
        if name not in self._index:
            raise MissingStateError(name)
        return self._index[name]

    def set_accept(self, name: str, is_accept: bool = True) -> None:
        self._accept[self._require(name)] = is_accept

    def mark_accepting(self, names: Iterable[str]) -> List[str]:
        """
        Flag every known name as accepting.
        Unknown names are skipped and returned so the caller can report them.
        """
        ignored = []
        for name in names:
            if name in self._index:
                self._accept[self._index[name]] = True
            else:
                ignored.append(name)
        return ignored

    def set_start(self, name: str) -> None:
        self._start = self._require(name)

    # --- Transitions ---

    def add_transition(self, state: str, symbol: str, next_state: str) -> None:
        if len(symbol) != 1:
            raise DFAError(f"symbol {symbol!r} must be a single character")
        src = self._require(state)
        if next_state not in self._index:
            raise UnknownTransitionTargetError(next_state)
        dest = self._index[next_state]

        existing = self._transitions[src].get(symbol)
        if existing is not None and existing != dest:
            raise DuplicateTransitionError(state, symbol, self._names[existing], next_state)
        self._transitions[src][symbol] = dest
        log.debug("transition_added", state=state, symbol=symbol, next_state=next_state)

    # --- Finalize ---

    def build(self) -> DFA:
        states = [
            State(name=name, is_accept=accept, transitions=dict(trans))
            for name, accept, trans in zip(self._names, self._accept, self._transitions)
        ]
        try:
            dfa = DFA(states=states, alphabet=list(self._alphabet), start=self._start)
        except ValidationError as e:
            raise InvalidAutomatonError(str(e)) from e

        log.debug(
            "dfa_built",
            states=len(states),
            alphabet=len(self._alphabet),
            start=dfa.start_state.name if dfa.start_state else None,
        )
        return dfa

    @classmethod
    def from_table(
        cls,
        states: List[str],
        alphabet: List[str],
        transitions: Dict[str, Dict[str, str]],
        start_state: str,
        accept_states: Iterable[str] = (),
    ) -> DFA:
        """
        Build a DFA from a ``state -> symbol -> next_state`` table.
        Unlike the text format, unknown accept-state names are an error here.
        """
        builder = cls()
        for symbol in alphabet:
            builder.add_symbol(symbol)
        for name in states:
            builder.add_state(name)
        for name in accept_states:
            builder.set_accept(name)
        for src, row in transitions.items():
            for symbol, dest in row.items():
                builder.add_transition(src, symbol, dest)
        builder.set_start(start_state)
        return builder.build()
