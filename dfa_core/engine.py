"""
Execution engine: walks a DFA over an input word.

A missing transition stops the run immediately; the rest of the word is not
read. Both that and ending in a non-accepting state are plain rejections.
"""

from typing import Iterable, List

import structlog

from .models import DFA, RunResult

log = structlog.get_logger()


def run(dfa: DFA, word: str) -> RunResult:
    if dfa.start is None:
        log.debug("run_rejected", word=word, reason="no_start_state")
        return RunResult(word=word, accepted=False, reason="automaton has no start state")

    curr = dfa.start
    trace_path = [dfa.states[curr].name]

    for consumed, symbol in enumerate(word):
        nxt = dfa.step(curr, symbol)
        if nxt is None:
            name = dfa.states[curr].name
            log.debug("run_rejected", word=word, state=name, symbol=symbol, consumed=consumed)
            return RunResult(
                word=word,
                accepted=False,
                final_state=name,
                reason=f"no transition for symbol '{symbol}' from state '{name}'",
                symbol=symbol,
                path=trace_path,
                consumed=consumed,
            )
        curr = nxt
        trace_path.append(dfa.states[curr].name)

    final = dfa.states[curr]
    reason = None if final.is_accept else f"ended in non-accepting state '{final.name}'"
    log.debug("run_finished", word=word, final_state=final.name, accepted=final.is_accept)
    return RunResult(
        word=word,
        accepted=final.is_accept,
        final_state=final.name,
        reason=reason,
        path=trace_path,
        consumed=len(word),
    )


def accepts(dfa: DFA, word: str) -> bool:
    return run(dfa, word).accepted


def run_many(dfa: DFA, words: Iterable[str]) -> List[RunResult]:
    return [run(dfa, w) for w in words]
