"""
Specification Parser
Turns the line-oriented DFA description into a DFA.

    alphabet={0,1}
    state={q0, q1}
    start_state=q0
    F={q1}
    (q0, 1)->q1

Single pass, top to bottom: names must be declared by a ``state=`` line
before anything refers to them. The first structural problem aborts the
parse with a DFAError carrying the line number.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import structlog

from .builder import DFABuilder
from .errors import DFAError, MalformedLineError
from .models import DFA

log = structlog.get_logger()


def _strip_braces(value: str) -> str:
    return value.strip().replace("{", "").replace("}", "")


def _split_names(value: str) -> List[str]:
    return [name.strip() for name in _strip_braces(value).split(",") if name.strip()]


class SpecParser:
    """
    Parser for DFA specification text.

    Args:
        truncate_symbols: keep only the first character of a multi-character
            transition symbol instead of rejecting the line.
    """

    def __init__(self, truncate_symbols: bool = False):
        self.truncate_symbols = truncate_symbols

    def parse(self, text: str) -> DFA:
        builder = DFABuilder()
        saw_start = False

        for line_no, raw in enumerate(text.splitlines(), 1):
            line = raw.strip()
            if not line:
                continue
            try:
                if line.startswith("alphabet="):
                    self._parse_alphabet(builder, line[len("alphabet="):])
                elif line.startswith("state="):
                    for name in _split_names(line[len("state="):]):
                        builder.add_state(name)
                elif line.startswith("start_state="):
                    builder.set_start(line[len("start_state="):].strip())
                    saw_start = True
                elif line.startswith("F="):
                    ignored = builder.mark_accepting(_split_names(line[len("F="):]))
                    if ignored:
                        log.debug("accept_states_ignored", line_no=line_no, names=ignored)
                elif line.startswith("("):
                    state, symbol, next_state = self._parse_transition(line)
                    if not builder.has_symbol(symbol):
                        log.warning(
                            "transition_symbol_outside_alphabet",
                            line_no=line_no,
                            symbol=symbol,
                        )
                    builder.add_transition(state, symbol, next_state)
                else:
                    log.debug("line_ignored", line_no=line_no, line=line)
            except DFAError as e:
                log.error("spec_parse_failed", line_no=line_no, error=e.message)
                raise e.at_line(line_no, line)

        if not saw_start:
            log.info("spec_without_start_state", states=len(builder.state_names))

        dfa = builder.build()
        log.info(
            "spec_parsed",
            states=len(dfa.states),
            alphabet=len(dfa.alphabet),
            accept_states=len(dfa.accept_states),
        )
        return dfa

    def parse_file(self, path: str) -> DFA:
        with open(Path(path), "r", encoding="utf-8") as f:
            return self.parse(f.read())

    def _parse_alphabet(self, builder: DFABuilder, value: str) -> None:
        for ch in _strip_braces(value):
            if ch == "," or ch.isspace():
                continue
            if not builder.has_symbol(ch):
                builder.add_symbol(ch)

    def _parse_transition(self, line: str) -> Tuple[str, str, str]:
        """Split ``(state, symbol)->next_state`` into its three parts."""
        parts = line.split("->")
        if len(parts) != 2:
            raise MalformedLineError("transition must contain exactly one '->'")

        source = parts[0].strip()
        next_state = parts[1].strip()
        if not (source.startswith("(") and source.endswith(")")):
            raise MalformedLineError("transition source must be written as '(state, symbol)'")

        inner = source[1:-1]
        if "," not in inner:
            raise MalformedLineError("transition source is missing the ',' between state and symbol")
        state, symbol = (p.strip() for p in inner.split(",", 1))

        if not state:
            raise MalformedLineError("transition is missing its state")
        if not symbol:
            raise MalformedLineError("transition is missing its symbol")
        if not next_state:
            raise MalformedLineError("transition is missing its target state")

        if len(symbol) > 1:
            if not self.truncate_symbols:
                raise MalformedLineError(f"transition symbol '{symbol}' is longer than one character")
            log.warning("transition_symbol_truncated", symbol=symbol, used=symbol[0])
            symbol = symbol[0]

        return state, symbol, next_state


# Global singleton instance
_parser: Optional[SpecParser] = None


def get_parser() -> SpecParser:
    """Get or create the global SpecParser singleton."""
    global _parser
    if _parser is None:
        _parser = SpecParser()
    return _parser


def parse_spec(text: str) -> DFA:
    """Convenience function to parse specification text."""
    return get_parser().parse(text)
