import pytest

from dfa_core.errors import (
    DFAError,
    DuplicateStateError,
    DuplicateTransitionError,
    MalformedLineError,
    MissingStateError,
    UnknownTransitionTargetError,
)
from dfa_core.spec_parser import SpecParser, get_parser, parse_spec

HEADER = """
alphabet={a,b}
state={q0, q1}
start_state=q0
F={q1}
"""


# --- Sample specification ---
def test_sample_structure(sample_dfa):
    assert sample_dfa.state_names == ["q0", "q1", "q1q2", "q2"]
    assert sample_dfa.alphabet == ["0", "1"]
    assert sample_dfa.start_state.name == "q0"
    assert [s.name for s in sample_dfa.accept_states] == ["q1q2", "q2"]
    assert len(list(sample_dfa.iter_transitions())) == 8


def test_sample_transitions(sample_dfa):
    triples = set(sample_dfa.iter_transitions())
    assert ("q0", "1", "q1") in triples
    assert ("q1", "0", "q1q2") in triples
    assert ("q2", "1", "q1q2") in triples


# --- Directives ---
def test_alphabet_skips_commas_and_spaces_and_collapses_duplicates(parser):
    dfa = parser.parse("alphabet={ a, b ,a,c }")
    assert dfa.alphabet == ["a", "b", "c"]


def test_state_lines_append(parser):
    dfa = parser.parse("state={q0}\nstate={ q1 ,q2 }")
    assert dfa.state_names == ["q0", "q1", "q2"]
    assert not any(s.is_accept for s in dfa.states)


def test_duplicate_state_fails_with_line_number(parser):
    with pytest.raises(DuplicateStateError) as exc:
        parser.parse("state={q0}\nstate={q0}")
    assert exc.value.line_no == 2


def test_whitespace_and_blank_lines_ignored(parser):
    dfa = parser.parse("\n\n    alphabet={0}   \n\n  state={q0}\n start_state=q0  \n")
    assert dfa.start_state.name == "q0"


def test_unrecognized_lines_ignored(parser):
    dfa = parser.parse(HEADER + "# a comment\nsomething else entirely\n")
    assert dfa.state_names == ["q0", "q1"]


def test_accept_set_ignores_unknown_names(parser):
    dfa = parser.parse("state={q0, q1, q2}\nstart_state=q0\nF={q1, bogus}")
    assert [s.is_accept for s in dfa.states] == [False, True, False]


def test_accept_set_with_only_unknown_names(parser):
    dfa = parser.parse("state={q0}\nstart_state=q0\nF={nope}")
    assert dfa.accept_states == []


# --- Start state ---
def test_start_state_before_state_line_fails(parser):
    with pytest.raises(MissingStateError) as exc:
        parser.parse("start_state=q0\nstate={q0}")
    assert exc.value.line_no == 1
    assert exc.value.name == "q0"


def test_unknown_start_state_fails(parser):
    with pytest.raises(MissingStateError):
        parser.parse("state={q0}\nstart_state=q7")


def test_missing_start_state_is_lenient(parser):
    dfa = parser.parse("alphabet={0}\nstate={q0}\nF={q0}")
    assert dfa.start is None
    assert dfa.state_names == ["q0"]


def test_empty_text_gives_empty_automaton(parser):
    dfa = parser.parse("")
    assert dfa.states == []
    assert dfa.start is None


# --- Transitions ---
def test_transition_unknown_target(parser):
    with pytest.raises(UnknownTransitionTargetError) as exc:
        parser.parse(HEADER + "(q0, a)->q9")
    assert exc.value.name == "q9"
    assert exc.value.line_no == 6
    assert "q9" in str(exc.value)


def test_transition_unknown_source(parser):
    with pytest.raises(MissingStateError):
        parser.parse(HEADER + "(q5, a)->q1")


def test_transition_before_states_fails(parser):
    with pytest.raises(MissingStateError):
        parser.parse("(q0, a)->q1\nstate={q0, q1}")


@pytest.mark.parametrize("line", [
    "(q0, a)q1",
    "(q0, a)->q1->q0",
    "(q0, a->q1",
    "(q0 a)->q1",
    "(q0, )->q1",
    "(, a)->q1",
    "(q0, a)->",
])
def test_malformed_transition_lines(parser, line):
    with pytest.raises(MalformedLineError) as exc:
        parser.parse(HEADER + line)
    assert exc.value.line == line


def test_multi_character_symbol_rejected_by_default(parser):
    with pytest.raises(MalformedLineError):
        parser.parse(HEADER + "(q0, ab)->q1")


def test_multi_character_symbol_truncated_when_enabled():
    dfa = SpecParser(truncate_symbols=True).parse(HEADER + "(q0, ab)->q1")
    assert list(dfa.iter_transitions()) == [("q0", "a", "q1")]


def test_comma_symbol_splits_on_first_comma(parser):
    dfa = parser.parse(HEADER + "(q0, ,)->q1")
    assert dfa.step(0, ",") == 1


def test_symbol_outside_alphabet_is_kept(parser):
    dfa = parser.parse(HEADER + "(q0, z)->q1")
    assert dfa.step(0, "z") == 1
    assert "z" not in dfa.alphabet


def test_conflicting_transition_fails(parser):
    with pytest.raises(DuplicateTransitionError):
        parser.parse(HEADER + "(q0, a)->q1\n(q0, a)->q0")


def test_repeated_identical_transition_is_fine(parser):
    dfa = parser.parse(HEADER + "(q0, a)->q1\n(q0, a)->q1")
    assert dfa.states[0].transitions == {"a": 1}


# --- Entry points ---
def test_parse_file(tmp_path):
    path = tmp_path / "dfa.txt"
    path.write_text(HEADER + "(q0, a)->q1\n", encoding="utf-8")
    dfa = SpecParser().parse_file(str(path))
    assert dfa.step(0, "a") == 1


def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpecParser().parse_file(str(tmp_path / "missing.txt"))


def test_module_helpers(sample_dfa):
    from dfa_core.samples import SAMPLE_SPEC
    assert get_parser() is get_parser()
    assert parse_spec(SAMPLE_SPEC) == sample_dfa


def test_free_text_with_arrow_is_ignored(parser):
    dfa = parser.parse("state={q0}\nstart_state=q0\nnote: q0 -> q0 loops\nq0, a)->q1\n")
    assert dfa.state_names == ["q0"]
    assert list(dfa.iter_transitions()) == []


def test_state_name_with_delimiter_fails(parser):
    with pytest.raises(DFAError) as exc:
        parser.parse("state={q0, q(1)}")
    assert exc.value.line_no == 1
