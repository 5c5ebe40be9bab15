"""Command-line entry point and interactive shell."""

from __future__ import annotations

import argparse
import shlex
import sys

from . import conclude, context, reflect, scheduler, verifier
from .governor import get_budget_status
from .model import BrainError
from .state import AppState

_RULE = "-" * 50


class _UsageError(Exception):
    """Raised instead of exiting when arguments cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise _UsageError(f"{self.format_usage()}{self.prog}: error: {message}")


def _add_commands(parser: argparse.ArgumentParser, required: bool) -> None:
    commands = parser.add_subparsers(dest="_invoked", metavar="COMMAND", required=required)

    def command(name: str, aliases: list[str], help_text: str, arg: str | None = None) -> None:
        sub = commands.add_parser(name, aliases=aliases, help=help_text)
        if arg is not None:
            sub.add_argument(arg)
        sub.set_defaults(command=name)

    command("context", ["c"], "print the working context for a task", "task_id")
    command("verify", ["v"], "verify a task's acceptance criteria", "task_id")
    command("next", ["n"], "list the tasks that can be started")
    command("reflect", ["r"], "generate a decision record for a task", "task_id")
    command("conclude", ["d", "done"], "mark a task as completed", "task_id")
    command("prompt", ["p"], "print the prompt for a role", "role")
    command("configure", [], "configure the tool")


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the command line; the command is optional."""
    parser = _Parser(prog="brain", description="The BRAIN Protocol Command-Line Interface")
    parser.set_defaults(command=None)
    _add_commands(parser, required=False)
    return parser


def _build_repl_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="brain", description="REPL commands")
    _add_commands(parser, required=True)
    return parser


def run_command(state: AppState, args: argparse.Namespace) -> None:
    """Run the command described by parsed arguments."""
    name = args.command
    if name == "context":
        context.run(state, args.task_id)
    elif name == "verify":
        verifier.run(state, args.task_id)
    elif name == "next":
        scheduler.run(state)
    elif name == "conclude":
        conclude.run(state, args.task_id)
    elif name == "reflect":
        reflect.run(state, args.task_id)
    elif name == "configure":
        print("// Nothing to configure.")
    elif name == "prompt":
        prompt_path = state.project_root / "docs" / "prompts" / f"{args.role}.md"
        try:
            content = prompt_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise BrainError(f"Failed to read prompt file at {prompt_path}: {exc}") from exc
        print(content)
    else:
        raise BrainError(f"Unknown command: {name!r}")


def display_status_bar() -> str:
    """Print the budget status between two rules and return the printed block."""
    block = "\n".join(["", _RULE, get_budget_status(), _RULE])
    print(block)
    return block


def _report_error(exc: Exception) -> None:
    print(f"\x1b[31mError: {exc}\x1b[0m", file=sys.stderr)


def run_repl(state: AppState) -> None:
    """Run the interactive shell until 'exit', end of input or interrupt."""
    parser = _build_repl_parser()
    print("Welcome to the BRAIN interactive shell. Type 'exit' to quit.")
    while True:
        display_status_bar()
        try:
            tasks = scheduler.get_next_tasks(state)
        except BrainError:
            tasks = []
        if tasks:
            print("\n--- Task(s) In Progress ---")
            for task in tasks:
                print(f"- [{task.id}] {task.label}")
            print("\nCommands: context <id>, verify <id>, done <id>, reflect <id>, next, exit")
        else:
            print("\n--- No Active Task ---")
            print("All tasks are completed or blocked.")
            print("\nCommands: reflect <id>, new (not available), exit")

        try:
            line = input(">> ")
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip().lower() == "exit":
            break
        try:
            words = shlex.split(line)
        except ValueError:
            words = []
        if not words:
            continue
        try:
            args = parser.parse_args(words)
        except _UsageError as exc:
            print(exc, file=sys.stderr)
            continue
        except SystemExit:
            continue
        try:
            run_command(state, args)
        except (BrainError, OSError) as exc:
            _report_error(exc)


def main(argv: list[str] | None = None) -> int:
    """Run one command from the arguments, or the shell when none is given."""
    try:
        args: argparse.Namespace | None = build_parser().parse_args(argv)
    except _UsageError:
        args = None

    try:
        state = AppState.create()
    except BrainError as exc:
        _report_error(exc)
        return 1

    if args is not None and args.command is not None:
        try:
            run_command(state, args)
        except (BrainError, OSError) as exc:
            _report_error(exc)
            return 1
        return 0

    run_repl(state)
    return 0


if __name__ == "__main__":
    sys.exit(main())