"""
Command line front end for the DFA engine.

Usage:
    dfa show spec.txt [--tuple] [--transitions] [--dot] ...
    dfa run spec.txt 0110 0 ""
    dfa run --sample 0110 --trace
    dfa build --output my_dfa.txt
"""

import argparse
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config import Settings, load_settings
from .engine import run
from .errors import DFAError
from .interactive import InteractiveBuilder
from .logging_config import setup_logging
from .models import DFA
from .presentation import (
    format_accept_states,
    format_alphabet,
    format_start_state,
    format_states,
    format_transitions,
    format_tuple,
    format_verdict,
    to_dot,
    to_spec_text,
)
from .samples import SAMPLE_SPEC
from .spec_parser import SpecParser

log = structlog.get_logger()

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def _add_spec_source(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("spec", nargs="?", help="Specification file, or '-' for stdin")
    parser.add_argument("--sample", action="store_true", help="Use the built-in sample automaton")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfa",
        description="Build deterministic finite automata from text and run words through them",
    )
    parser.add_argument("--config", type=str, default=None, help="YAML settings file")
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print parts of the automaton")
    _add_spec_source(show)
    show.add_argument("--states", action="store_true", help="Set of states")
    show.add_argument("--alphabet", action="store_true", help="Alphabet")
    show.add_argument("--start", action="store_true", help="Start state")
    show.add_argument("--accept", action="store_true", help="Set of accepting states")
    show.add_argument("--tuple", action="store_true", help="Formal 5-tuple")
    show.add_argument("--transitions", action="store_true", help="Transition listing")
    show.add_argument("--dot", action="store_true", help="Graphviz DOT source")
    show.add_argument("--spec", dest="show_spec", action="store_true", help="Specification text")

    run_cmd = sub.add_parser("run", help="Decide whether words are accepted")
    _add_spec_source(run_cmd)
    run_cmd.add_argument("words", nargs="+", help="Words to run ('' for the empty word)")
    run_cmd.add_argument("--trace", action="store_true", help="Print the visited states")
    run_cmd.add_argument("--json", action="store_true", help="Print results as JSON lines")

    build = sub.add_parser("build", help="Build an automaton interactively")
    build.add_argument("--output", "-o", type=str, default=None, help="Write the specification text here")

    return parser


def _load_dfa(args: argparse.Namespace, settings: Settings) -> DFA:
    parser = SpecParser(truncate_symbols=settings.truncate_symbols)
    if args.sample:
        if args.spec is not None:
            if args.command != "run":
                raise DFAError("give either a specification file or --sample, not both")
            # argparse hands the first word to the optional positional
            args.words.insert(0, args.spec)
            args.spec = None
        return parser.parse(SAMPLE_SPEC)
    if args.spec is None:
        raise DFAError("a specification file, '-' or --sample is required")
    if args.spec == "-":
        return parser.parse(sys.stdin.read())
    return parser.parse_file(args.spec)


def _cmd_show(args: argparse.Namespace, dfa: DFA) -> int:
    sections = [
        (args.states, lambda: format_states(dfa)),
        (args.alphabet, lambda: format_alphabet(dfa)),
        (args.start, lambda: format_start_state(dfa)),
        (args.accept, lambda: format_accept_states(dfa)),
        (args.tuple, lambda: format_tuple(dfa)),
        (args.transitions, lambda: format_transitions(dfa)),
        (args.dot, lambda: to_dot(dfa).rstrip("\n")),
        (args.show_spec, lambda: to_spec_text(dfa).rstrip("\n")),
    ]
    chosen = [render for wanted, render in sections if wanted]
    if not chosen:
        chosen = [lambda: format_tuple(dfa), lambda: format_transitions(dfa)]
    for render in chosen:
        print(render())
    return EXIT_OK


def _cmd_run(args: argparse.Namespace, dfa: DFA, settings: Settings) -> int:
    all_accepted = True
    for word in args.words:
        if len(word) > settings.max_word_length:
            print(f"error: word longer than {settings.max_word_length} symbols", file=sys.stderr)
            return EXIT_ERROR
        result = run(dfa, word)
        all_accepted = all_accepted and result.accepted
        if args.json:
            print(result.model_dump_json())
            continue
        print(f"{word!r}: {format_verdict(result)}")
        if args.trace:
            print("  path: " + " -> ".join(result.path))
    return EXIT_OK if all_accepted else EXIT_REJECTED


def _cmd_build(args: argparse.Namespace) -> int:
    print("Create a deterministic finite automaton.\n")
    dfa = InteractiveBuilder().build()
    print(format_tuple(dfa))
    print(format_transitions(dfa))
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(to_spec_text(dfa))
        print(f"\nSpecification saved to {args.output}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.log_level:
            settings = Settings(**{**settings.model_dump(), "log_level": args.log_level})
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level)

    if args.command == "build":
        return _cmd_build(args)

    try:
        dfa = _load_dfa(args, settings)
    except FileNotFoundError as exc:
        log.error("spec_file_not_found", error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except DFAError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.command == "show":
        return _cmd_show(args, dfa)
    return _cmd_run(args, dfa, settings)


if __name__ == "__main__":
    sys.exit(main())
