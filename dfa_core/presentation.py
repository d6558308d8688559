"""
Formal Presentation
Read-only text renderings of a DFA: the 5-tuple, the transition
listing, the specification text format and Graphviz DOT source.
"""

from typing import Dict, Iterable, List

from .models import DFA, RunResult


def _braced(items: Iterable[str]) -> str:
    return "{" + ", ".join(items) + "}"


def format_states(dfa: DFA) -> str:
    return _braced(dfa.state_names)


def format_alphabet(dfa: DFA) -> str:
    return _braced(dfa.alphabet)


def format_start_state(dfa: DFA) -> str:
    start = dfa.start_state
    return start.name if start is not None else ""


def format_accept_states(dfa: DFA) -> str:
    return _braced(s.name for s in dfa.accept_states)


def format_transitions(dfa: DFA) -> str:
    """One ``δ(state, symbol) = next_state`` line per edge."""
    return "\n".join(
        f"δ({state}, {symbol}) = {next_state}"
        for state, symbol, next_state in dfa.iter_transitions()
    )


def format_tuple(dfa: DFA) -> str:
    """The formal definition ``A = <Q, Σ, q0, δ, F>``."""
    return (
        f"A = <Q = {format_states(dfa)}, "
        f"Σ = {format_alphabet(dfa)}, "
        f"{format_start_state(dfa)}, δ, "
        f"F = {format_accept_states(dfa)}>"
    )


def format_verdict(result: RunResult) -> str:
    if result.accepted:
        return result.verdict
    return f"{result.verdict} ({result.reason})"


def to_spec_text(dfa: DFA) -> str:
    """
    Render the DFA in the specification format read by SpecParser.

    Parsing the output gives back an automaton with the same states, flags,
    start state and edges. Symbols that the alphabet line cannot carry
    (',', whitespace, braces) only survive through their transitions.
    """
    lines = [
        f"alphabet={format_alphabet(dfa)}",
        f"state={format_states(dfa)}",
    ]
    if dfa.start_state is not None:
        lines.append(f"start_state={dfa.start_state.name}")
    lines.append(f"F={format_accept_states(dfa)}")
    for state, symbol, next_state in dfa.iter_transitions():
        lines.append(f"({state}, {symbol})->{next_state}")
    return "\n".join(lines) + "\n"


def to_dot(dfa: DFA) -> str:
    """Graphviz DOT source; edges sharing a destination are merged."""
    lines = ["digraph DFA {", "  rankdir=LR;", "  node [shape=circle];"]

    for state in dfa.accept_states:
        lines.append(f'  "{state.name}" [shape=doublecircle];')

    if dfa.start_state is not None:
        lines.append("  __start__ [shape=point];")
        lines.append(f'  __start__ -> "{dfa.start_state.name}";')

    for state in dfa.states:
        # Group by destination
        dest_symbols: Dict[str, List[str]] = {}
        for symbol, target in state.transitions.items():
            dest_symbols.setdefault(dfa.states[target].name, []).append(symbol)
        for dest, symbols in dest_symbols.items():
            label = ",".join(symbols).replace('"', '\\"')
            lines.append(f'  "{state.name}" -> "{dest}" [label="{label}"];')

    lines.append("}")
    return "\n".join(lines) + "\n"
