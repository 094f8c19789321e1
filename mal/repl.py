"""
mal REPL - interactive entry point

Reads one line at a time, prints one result (or ``[ERROR] ...``) per form, and
keeps line-editing history in a file between sessions.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Readline support for line editing and history
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    READLINE_AVAILABLE = False

from mal import __version__
from mal.config import get_history_path, get_log_level, get_prompt
from mal.errors import MalError
from mal.interpreter import Interpreter

logger = logging.getLogger(__name__)


def load_history(history_path: Path) -> None:
    if not READLINE_AVAILABLE:
        return
    try:
        readline.read_history_file(history_path)
    except OSError:
        logger.warning("History file '%s' not found", history_path)


def save_history(history_path: Path) -> None:
    if not READLINE_AVAILABLE:
        return
    try:
        readline.write_history_file(history_path)
    except OSError as e:
        logger.warning("Could not save history to '%s': %s", history_path, e)


def repl(interpreter: Interpreter, prompt: str, history_path: Path) -> None:
    """Run the read-eval-print loop until EOF or an empty line."""
    load_history(history_path)
    while True:
        try:
            line = input(prompt)
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break
        if not line:
            break
        save_history(history_path)
        for output in interpreter.rep(line):
            print(output)


def run_file(interpreter: Interpreter, script: Path) -> int:
    """Evaluate every form of `script`; returns a process exit status."""
    try:
        interpreter.eval(script.read_text(encoding="utf-8"))
    except MalError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mal", description="A small Lisp interpreter")
    parser.add_argument("script", nargs="?", type=Path, help="mal source file to run")
    parser.add_argument(
        "--history",
        type=Path,
        default=None,
        help="history file (default: $MAL_HISTORY_PATH or .mal-history)",
    )
    parser.add_argument("--debug", action="store_true", help="log each evaluated form")
    parser.add_argument("--version", action="version", version=f"mal {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter()
    if args.script is not None:
        if not args.script.exists():
            print(f"Error: Script file '{args.script}' does not exist", file=sys.stderr)
            return 1
        return run_file(interpreter, args.script)

    repl(interpreter, get_prompt(), args.history or get_history_path())
    return 0


if __name__ == "__main__":
    sys.exit(main())
