"""
Interactive builder.

Prompts for a complete DFA field by field: alphabet, states with their
accept flags, one destination for every (state, symbol) pair, and the
start state. Invalid answers are reported and asked again.

All I/O goes through the ``ask`` / ``say`` callables (``input`` and
``print`` by default).
"""

from typing import Callable, Optional

import structlog

from .builder import DFABuilder
from .errors import DFAError
from .models import DFA

log = structlog.get_logger()

YES_ANSWERS = ("s", "y", "yes")
NO_ANSWERS = ("n", "no")


class InteractiveBuilder:
    def __init__(
        self,
        ask: Optional[Callable[[str], str]] = None,
        say: Optional[Callable[[str], None]] = None,
    ):
        self.ask = ask if ask is not None else input
        self.say = say if say is not None else print

    def build(self) -> DFA:
        builder = DFABuilder()
        self.read_alphabet(builder)
        self.read_states(builder)
        self.read_transitions(builder)
        self.read_start_state(builder)
        return builder.build()

    def _ask_count(self, prompt: str) -> int:
        while True:
            answer = self.ask(prompt).strip()
            try:
                size = int(answer)
            except ValueError:
                self.say("Invalid input, please enter a whole number.")
                continue
            if size < 0:
                self.say("Invalid input, please enter a whole number.")
                continue
            return size

    def read_alphabet(self, builder: DFABuilder) -> None:
        size = self._ask_count("Enter the cardinality of the alphabet: ")
        # The slot is only consumed by a new, non-empty symbol
        while len(builder.alphabet) < size:
            answer = self.ask(f"Enter symbol {len(builder.alphabet) + 1}: ").strip()
            if not answer:
                self.say("Empty input, please enter a symbol.")
                continue
            symbol = answer[0]
            if builder.has_symbol(symbol):
                self.say("The symbol already exists in the alphabet.")
                continue
            builder.add_symbol(symbol)

    def read_states(self, builder: DFABuilder) -> None:
        size = self._ask_count("Enter the cardinality of the set of states: ")
        while len(builder.state_names) < size:
            name = self.ask(f"Enter the name of state {len(builder.state_names)}: ").strip()
            if not name:
                self.say("Empty input, please enter a state name.")
                continue
            if builder.has_state(name):
                self.say(f'The state "{name}" has already been defined.')
                continue
            try:
                builder.check_state_name(name)
            except DFAError as e:
                self.say(f"Invalid state name: {e}")
                continue
            builder.add_state(name, is_accept=self._ask_accept())

    def _ask_accept(self) -> bool:
        while True:
            answer = self.ask("Is it an accepting state? (y/n): ").strip().lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self.say("Invalid option.")

    def read_transitions(self, builder: DFABuilder) -> None:
        for state in builder.state_names:
            for symbol in builder.alphabet:
                while True:
                    target = self.ask(
                        f'Enter the state "{state}" moves to on symbol {symbol}: '
                    ).strip()
                    if not builder.has_state(target):
                        self.say("The state does not exist.")
                        continue
                    builder.add_transition(state, symbol, target)
                    break

    def read_start_state(self, builder: DFABuilder) -> None:
        if not builder.state_names:
            log.info("interactive_build_without_states")
            return
        while True:
            name = self.ask("Enter the start state: ").strip()
            if builder.has_state(name):
                builder.set_start(name)
                return
            self.say("The state does not exist.")
