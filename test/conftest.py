import pytest

from dfa_core.builder import DFABuilder
from dfa_core.logging_config import setup_logging
from dfa_core.samples import SAMPLE_SPEC
from dfa_core.spec_parser import SpecParser

# Keep debug chatter out of captured stdout
setup_logging(log_level="WARNING")


@pytest.fixture
def parser():
    return SpecParser()


@pytest.fixture
def sample_dfa(parser):
    return parser.parse(SAMPLE_SPEC)


@pytest.fixture
def ends_with_b():
    """Strings over {a, b} ending in 'b'."""
    return DFABuilder.from_table(
        states=["q0", "q1"],
        alphabet=["a", "b"],
        transitions={
            "q0": {"a": "q0", "b": "q1"},
            "q1": {"a": "q0", "b": "q1"},
        },
        start_state="q0",
        accept_states=["q1"],
    )
