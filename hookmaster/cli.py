"""Command-line interface."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from hookmaster.hook_manager import HookError, HookManager

VERSION = "hookmaster 0.1.0"

HELP = """\
hookmaster 0.1.0
Some nice git hooks for your pleasure

USAGE:
    hookmaster [OPTIONS] <COMMAND> [ARGS]...

OPTIONS:
    -h, --help       Print help information
    -V, --version    Print version information
    -v, --verbose    Enable verbose output

COMMANDS:
    add                 Add hookmaster hooks to all projects under the specified path
    init                Initialize current repository with sample githooks.toml
    run                 Run a specific hook command
    prepare-commit-msg  Process prepare-commit-msg hook

Use 'hookmaster <command> --help' for more information on a specific command.
"""

_COMMAND_HELP = {
    "add": """\
Add hookmaster hooks to all projects under the specified path

USAGE:
    hookmaster add <PATH>

ARGS:
    <PATH>    Path to add hooks to (searches recursively for git repositories)
""",
    "init": """\
Initialize current repository with sample githooks.toml

USAGE:
    hookmaster init
""",
    "run": """\
Run a specific hook command

USAGE:
    hookmaster run <HOOK_NAME> [ARGS]...

ARGS:
    <HOOK_NAME>    Hook name to run (e.g., pre-commit, commit-msg, etc.)
    [ARGS]...      Additional arguments to pass to the hook
""",
    "prepare-commit-msg": """\
Process prepare-commit-msg hook

USAGE:
    hookmaster prepare-commit-msg <COMMIT_MSG_FILE> [COMMIT_SOURCE] [COMMIT_SHA]

ARGS:
    <COMMIT_MSG_FILE>    Path to the commit message file
    [COMMIT_SOURCE]      Commit source (optional)
    [COMMIT_SHA]         SHA1 of the commit (optional)
""",
}

_MORE_INFO = "\n\nFor more information try --help"


class UsageError(Exception):
    """Raised when the command line cannot be understood."""


@dataclass(frozen=True)
class Command:
    """A parsed subcommand with its arguments."""

    name: str
    path: Path | None = None
    hook_name: str | None = None
    args: tuple[str, ...] = ()
    commit_msg_file: Path | None = None
    commit_source: str | None = None
    commit_sha: str | None = None


def command_help(command: str) -> str | None:
    """Help text for a subcommand, or None if there is no such command."""
    return _COMMAND_HELP.get(command)


def _take_flag(args: list[str], *keys: str) -> bool:
    for position, arg in enumerate(args):
        if arg in keys:
            del args[position]
            return True
    return False


def _take_free(args: list[str]) -> str | None:
    return args.pop(0) if args else None


def _require(args: list[str], name: str) -> str:
    value = _take_free(args)
    if value is None:
        raise UsageError(f"Missing required argument: {name}{_MORE_INFO}")
    return value


def _reject_rest(args: list[str]) -> None:
    if args:
        raise UsageError(f"Unexpected argument(s): {', '.join(args)}{_MORE_INFO}")


def parse_args(argv: Sequence[str]) -> tuple[bool, Command]:
    """Parse the command line into ``(verbose, command)``.

    Prints version or help and raises SystemExit(0) when asked for them.
    """
    args = list(argv)

    if _take_flag(args, "-V", "--version"):
        print(VERSION)
        raise SystemExit(0)

    if _take_flag(args, "-h", "--help"):
        subcommand = _take_free(args)
        if subcommand is None:
            print(HELP)
        else:
            text = command_help(subcommand)
            if text is None:
                print(f"Unknown command: {subcommand}", file=sys.stderr)
                print("Run 'hookmaster --help' for usage information.", file=sys.stderr)
            else:
                print(text)
        raise SystemExit(0)

    verbose = _take_flag(args, "-v", "--verbose")

    subcommand = _take_free(args)
    if subcommand is None:
        raise UsageError(
            "No command specified. Run 'hookmaster --help' for usage information."
        )

    if subcommand == "add":
        path = _require(args, "PATH")
        _reject_rest(args)
        command = Command("add", path=Path(path))
    elif subcommand == "init":
        _reject_rest(args)
        command = Command("init")
    elif subcommand == "run":
        hook_name = _require(args, "HOOK_NAME")
        command = Command("run", hook_name=hook_name, args=tuple(args))
    elif subcommand == "prepare-commit-msg":
        commit_msg_file = _require(args, "COMMIT_MSG_FILE")
        commit_source = _take_free(args)
        commit_sha = _take_free(args)
        _reject_rest(args)
        command = Command(
            "prepare-commit-msg",
            commit_msg_file=Path(commit_msg_file),
            commit_source=commit_source,
            commit_sha=commit_sha,
        )
    else:
        raise UsageError(f"Unknown command: '{subcommand}'{_MORE_INFO}")

    return verbose, command


def _run(verbose: bool, command: Command) -> None:
    manager = HookManager()
    if command.name == "add":
        if verbose:
            print(f"Adding hookmaster hooks to repositories under: {command.path}")
        manager.add_hooks_to_path(command.path)
    elif command.name == "init":
        if verbose:
            print("Initializing repository with sample githooks.toml")
        manager.init_repository()
    elif command.name == "run":
        if verbose:
            print(f"Running hook: {command.hook_name}")
        manager.run_hook(command.hook_name, list(command.args))
    elif command.name == "prepare-commit-msg":
        if verbose:
            print("Processing prepare-commit-msg hook")
        manager.prepare_commit_msg(
            command.commit_msg_file, command.commit_source, command.commit_sha
        )
    else:
        raise UsageError(f"Unknown command: '{command.name}'{_MORE_INFO}")


def _report(exc: BaseException) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    causes = []
    cause = exc.__cause__
    while cause is not None:
        causes.append(str(cause))
        cause = cause.__cause__
    if causes:
        print("\nCaused by:", file=sys.stderr)
        for text in causes:
            print(f"    {text}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run hookmaster; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        verbose, command = parse_args(argv)
        _run(verbose, command)
    except (UsageError, HookError) as exc:
        _report(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())