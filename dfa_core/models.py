from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, Iterator, List, Optional, Tuple


class State(BaseModel):
    """
    One node of the state arena.

    ``frozen`` only blocks field assignment; the ``transitions`` dict itself
    is not locked. It is read-only by convention: DFABuilder hands every
    State its own copy and nothing in the package writes to it afterwards.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    is_accept: bool = False
    # symbol -> index of the destination in the owning DFA's state list
    transitions: Dict[str, int] = Field(default_factory=dict)


class DFA(BaseModel):
    """
    Immutable deterministic finite automaton.

    States live in an arena (``states``) and refer to each other by index,
    so cycles and back-edges need no shared ownership. ``start`` is None only
    for the empty automaton produced by a lenient parse.
    Instances are built through DFABuilder or SpecParser, never mutated
    (see State for the limits of that guarantee).
    """
    model_config = ConfigDict(frozen=True)

    states: List[State] = Field(default_factory=list, description="State arena, declaration order")
    alphabet: List[str] = Field(default_factory=list, description="Input symbols, insertion order")
    start: Optional[int] = Field(None, description="Index of the start state")

    @model_validator(mode='after')
    def validate_integrity(self):
        names = [s.name for s in self.states]
        if any(not n for n in names):
            raise ValueError("State names must not be empty.")
        if len(set(names)) != len(names):
            raise ValueError("State names must be unique.")

        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("Alphabet symbols must be unique.")
        for symbol in self.alphabet:
            if len(symbol) != 1:
                raise ValueError(f"Alphabet symbol '{symbol}' is not a single character.")

        if self.start is not None and not 0 <= self.start < len(self.states):
            raise ValueError(f"Start index {self.start} is not a state.")

        for state in self.states:
            for symbol, target in state.transitions.items():
                if len(symbol) != 1:
                    raise ValueError(f"State '{state.name}' has multi-character symbol '{symbol}'.")
                if not 0 <= target < len(self.states):
                    raise ValueError(f"State '{state.name}' transitions to unknown index {target}.")
        return self

    @property
    def state_names(self) -> List[str]:
        return [s.name for s in self.states]

    @property
    def start_state(self) -> Optional[State]:
        if self.start is None:
            return None
        return self.states[self.start]

    @property
    def accept_states(self) -> List[State]:
        return [s for s in self.states if s.is_accept]

    @property
    def is_empty(self) -> bool:
        return self.start is None

    def index_of(self, name: str) -> Optional[int]:
        for i, state in enumerate(self.states):
            if state.name == name:
                return i
        return None

    def state(self, name: str) -> Optional[State]:
        idx = self.index_of(name)
        return None if idx is None else self.states[idx]

    def step(self, index: int, symbol: str) -> Optional[int]:
        """Destination index for ``symbol`` from state ``index``, or None."""
        return self.states[index].transitions.get(symbol)

    def iter_transitions(self) -> Iterator[Tuple[str, str, str]]:
        """Yield (state, symbol, next_state) name triples in arena order."""
        for state in self.states:
            for symbol, target in state.transitions.items():
                yield state.name, symbol, self.states[target].name

    def missing_transitions(self) -> List[Tuple[str, str]]:
        """(state, symbol) pairs of the cross product with no edge."""
        return [
            (state.name, symbol)
            for state in self.states
            for symbol in self.alphabet
            if symbol not in state.transitions
        ]

    def is_complete(self) -> bool:
        return not self.missing_transitions()


class RunResult(BaseModel):
    """Outcome of running one word through a DFA."""
    word: str
    accepted: bool
    final_state: Optional[str] = None
    reason: Optional[str] = Field(None, description="Why the word was rejected")
    symbol: Optional[str] = Field(None, description="Symbol with no transition, if any")
    path: List[str] = Field(default_factory=list, description="Visited states, start first")
    consumed: int = 0

    @property
    def verdict(self) -> str:
        if self.accepted:
            return "The word is accepted by the automaton."
        return "The word is rejected by the automaton."
