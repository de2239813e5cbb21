"""Commit message formatting driven by the current branch name."""

from __future__ import annotations

import re
import subprocess
from collections.abc import Callable
from os import PathLike
from pathlib import Path

_TICKET_RE = re.compile(r"([A-Z][A-Z0-9]+-\d+)")
_BRANCH_RE = re.compile(
    r"\A(?:feature/|bugfix/|hotfix/|fix/)?[A-Z][A-Z0-9]+-\d+(?:-(.+))?\Z"
)


class CommitMessageError(Exception):
    """Raised when the commit message cannot be prepared."""


def to_title_case(text: str) -> str:
    """Capitalise each whitespace-separated word and lower-case the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


def current_branch_name() -> str:
    """Return the abbreviated name of the branch HEAD points at."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise CommitMessageError("Failed to execute git command") from exc

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise CommitMessageError(f"Git command failed: {stderr}")

    try:
        return result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError as exc:
        raise CommitMessageError("Invalid UTF-8 in git output") from exc


class CommitMessageProcessor:
    """Fills empty commit messages with a summary derived from the branch."""

    def __init__(self, branch_name_provider: Callable[[], str] | None = None) -> None:
        self._branch_name = branch_name_provider or current_branch_name

    def format_commit_message_from_branch(self, branch_name: str) -> str | None:
        """Turn e.g. ``feature/ABC-12-do-stuff`` into ``ABC-12: Do Stuff``.

        Returns None when the branch name holds no ticket id.
        """
        ticket = _TICKET_RE.search(branch_name)
        if ticket is None:
            return None
        ticket_id = ticket.group(0)

        match = _BRANCH_RE.match(branch_name)
        description = (match.group(1) if match else None) or ""
        if not description:
            return f"{ticket_id}: "

        words = description.replace("-", " ").replace("_", " ")
        return f"{ticket_id}: {to_title_case(words)}"

    def process_commit_msg_file(
        self,
        commit_msg_file: str | PathLike[str],
        commit_source: str | None = None,
        commit_sha: str | None = None,
    ) -> None:
        """Prepend a branch-derived summary to a message that has no content yet."""
        path = Path(commit_msg_file)
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                current = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise CommitMessageError(
                f"Failed to read commit message file: {path}"
            ) from exc

        has_content = any(
            line.strip() and not line.startswith("#") for line in current.split("\n")
        )
        if has_content:
            return

        formatted = self.format_commit_message_from_branch(self._branch_name())
        if formatted is None:
            return

        try:
            with path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(f"{formatted}\n\n{current}")
        except OSError as exc:
            raise CommitMessageError(
                f"Failed to write commit message file: {path}"
            ) from exc