"""Command-line interface for typedrill.

Commands:
    typedrill tokenize [FILE] [--json] [--strict]
    typedrill topics [--topics DIR]
    typedrill play [--topics DIR] [--topic ID]

``play`` is a line-oriented shell: every character of an entered line is fed
to the session as one keystroke. Control lines are listed in PLAY_HELP.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from typedrill import __version__
from typedrill.config import SessionConfig
from typedrill.content_loader import (
    load_bundled_index,
    load_bundled_topic,
    load_topic,
    load_topic_index,
)
from typedrill.errors import ContentError, TokenizeError
from typedrill.keys import ADVANCE, BACKSPACE, RESTART, actions_for_line
from typedrill.lexer import tokenize
from typedrill.models import Topic, TopicEntry
from typedrill.practice import Practice
from typedrill.serialization import to_json
from typedrill.utils.logger import configure_logging

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]

QUIT_COMMANDS = {":q", ":quit"}
RESTART_COMMANDS = {":r", ":restart"}
BACKSPACE_COMMANDS = {":bs", ":backspace"}
ADVANCE_COMMANDS = {"", ":n", ":next"}
PLAY_HELP = "Type the code. Empty line or :n = next, :bs = backspace, :r = restart, :q = quit."
CARET = "▍"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="typedrill", description="Learn code by typing it")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command")

    tokenize_cmd = commands.add_parser("tokenize", help="split code into typing units")
    tokenize_cmd.add_argument("file", nargs="?", default="-", help="source file ('-' for stdin)")
    tokenize_cmd.add_argument("--json", action="store_true", help="emit JSON")
    tokenize_cmd.add_argument(
        "--strict", action="store_true", help="fail on unterminated string literals"
    )

    topics_cmd = commands.add_parser("topics", help="list available topics")
    topics_cmd.add_argument("--topics", type=Path, default=None, help="topics directory")

    play_cmd = commands.add_parser("play", help="practice a topic")
    play_cmd.add_argument("--topics", type=Path, default=None, help="topics directory")
    play_cmd.add_argument("--topic", default=None, help="topic id (default: first in index)")
    return parser


def run(
    argv: list[str] | None = None,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.command == "tokenize":
        return tokenize_command(args.file, as_json=args.json, strict=args.strict, print_fn=print_fn)
    if args.command == "topics":
        return topics_command(args.topics, print_fn=print_fn)
    if args.command == "play" or args.command is None:
        topics_dir = getattr(args, "topics", None)
        topic_id = getattr(args, "topic", None)
        return play_command(topics_dir, topic_id, input_fn=input_fn, print_fn=print_fn)
    parser.error(f"unknown command {args.command!r}")
    return 2


def _read_source(file: str) -> str:
    """Read code without newline translation so tokens keep \\r\\n."""
    if file == "-":
        return sys.stdin.read()
    with open(file, encoding="utf-8", newline="") as handle:
        return handle.read()


def tokenize_command(file: str, *, as_json: bool, strict: bool, print_fn: PrintFn = print) -> int:
    """Print the tokens of a source file."""
    source_file = None if file == "-" else file
    try:
        code = _read_source(file)
    except OSError as exc:
        print_fn(f"Cannot read {file}: {exc}")
        return 1
    except UnicodeDecodeError as exc:
        print_fn(f"Cannot read {file}: not valid UTF-8 ({exc.reason} at byte {exc.start})")
        return 1
    try:
        tokens = tokenize(
            code, source_file=source_file, config=SessionConfig(strict_strings=strict)
        )
    except TokenizeError as exc:
        print_fn(f"Tokenize failed: {exc}")
        return 1

    if as_json:
        print_fn(to_json(tokens, indent=2))
        return 0
    for token in tokens:
        print_fn(f"{token.lineno}:{token.col}\t{token.kind.name}\t{token.text!r}")
    return 0


def _load_index(topics_dir: Path | None) -> list[TopicEntry]:
    if topics_dir is None:
        return load_bundled_index()
    return load_topic_index(topics_dir)


def _load_topic(topics_dir: Path | None, topic_id: str) -> Topic:
    if topics_dir is None:
        return load_bundled_topic(topic_id)
    return load_topic(topics_dir, topic_id)


def topics_command(topics_dir: Path | None, *, print_fn: PrintFn = print) -> int:
    """List topics from a directory or the bundled set."""
    try:
        entries = _load_index(topics_dir)
    except ContentError as exc:
        print_fn(f"Could not load topics: {exc}")
        return 1
    width = max(len(entry.id) for entry in entries)
    for entry in entries:
        print_fn(f"{entry.id:<{width}}  {entry.title}")
    return 0


def play_command(
    topics_dir: Path | None,
    topic_id: str | None,
    *,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> int:
    """Run the practice shell for one topic."""
    try:
        if topic_id is None:
            topic_id = _load_index(topics_dir)[0].id
        topic = _load_topic(topics_dir, topic_id)
    except ContentError as exc:
        print_fn(f"Could not load topic: {exc}")
        return 1

    practice = Practice(topic)
    print_fn(f"=== {topic.title or topic.id} ===")
    print_fn(PLAY_HELP)
    while True:
        _render(practice, print_fn)
        if practice.topic_complete:
            return 0
        try:
            line = input_fn("> ")
        except EOFError:
            return 0

        if line in QUIT_COMMANDS:
            return 0
        if line in RESTART_COMMANDS:
            practice.handle(RESTART)
        elif line in BACKSPACE_COMMANDS:
            practice.handle(BACKSPACE)
        elif line in ADVANCE_COMMANDS:
            practice.handle(ADVANCE)
        else:
            for action in actions_for_line(line):
                practice.handle(action)


def _render(practice: Practice, print_fn: PrintFn) -> None:
    """Print the current snapshot."""
    snap = practice.snapshot()
    if practice.topic_complete:
        print_fn("\n" + snap.done_text)
        print_fn("This topic is complete. Well done.")
        return

    question = practice.question
    print_fn(f"\n[{snap.question_number}/{snap.total_questions}]")
    if question is not None and question.description:
        print_fn(question.description)
    if snap.ready_for_next:
        print_fn(snap.done_text)
        print_fn("Question complete. Press Enter for the next question, or :r to retry.")
    else:
        print_fn(f"{snap.done_text}{CARET}{snap.remaining}")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
