"""Git hook scripts and discovery of repositories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import ClassVar

_KNOWN_HOOKS = frozenset(
    {
        "pre-commit",
        "prepare-commit-msg",
        "commit-msg",
        "post-commit",
        "pre-push",
        "post-receive",
        "pre-receive",
        "update",
    }
)


@dataclass(frozen=True)
class GitHook:
    """A git hook, identified by its file name in ``.git/hooks``."""

    name: str

    PRE_COMMIT: ClassVar[GitHook]
    PREPARE_COMMIT_MSG: ClassVar[GitHook]
    COMMIT_MSG: ClassVar[GitHook]
    POST_COMMIT: ClassVar[GitHook]
    PRE_PUSH: ClassVar[GitHook]
    POST_RECEIVE: ClassVar[GitHook]
    PRE_RECEIVE: ClassVar[GitHook]
    UPDATE: ClassVar[GitHook]

    @classmethod
    def from_str(cls, s: str) -> GitHook:
        """The hook named ``s``; unknown names become custom hooks."""
        return cls(s)

    @classmethod
    def standard_hooks(cls) -> list[GitHook]:
        """The hooks installed into every repository."""
        return [
            cls.PRE_COMMIT,
            cls.PREPARE_COMMIT_MSG,
            cls.COMMIT_MSG,
            cls.POST_COMMIT,
            cls.PRE_PUSH,
        ]

    @property
    def filename(self) -> str:
        return self.name

    @property
    def is_custom(self) -> bool:
        return self.name not in _KNOWN_HOOKS

    def generate_script_content(self) -> str:
        """The shell script that forwards the hook to hookmaster."""
        if self == GitHook.PREPARE_COMMIT_MSG:
            return '#!/bin/sh\nhookmaster prepare-commit-msg "$@"\n'
        return f'#!/bin/sh\nhookmaster run {self.filename} "$@"\n'

    def install_to_repo(self, repo_path: str | PathLike[str]) -> Path:
        """Write the executable hook script into the repository; return its path."""
        hooks_dir = Path(repo_path) / ".git" / "hooks"
        hooks_dir.mkdir(parents=True, exist_ok=True)
        hook_file = hooks_dir / self.filename
        hook_file.write_bytes(self.generate_script_content().encode("utf-8"))
        if os.name == "posix":
            hook_file.chmod(0o755)
        return hook_file


GitHook.PRE_COMMIT = GitHook("pre-commit")
GitHook.PREPARE_COMMIT_MSG = GitHook("prepare-commit-msg")
GitHook.COMMIT_MSG = GitHook("commit-msg")
GitHook.POST_COMMIT = GitHook("post-commit")
GitHook.PRE_PUSH = GitHook("pre-push")
GitHook.POST_RECEIVE = GitHook("post-receive")
GitHook.PRE_RECEIVE = GitHook("pre-receive")
GitHook.UPDATE = GitHook("update")


def is_git_repository(path: str | PathLike[str]) -> bool:
    """True if ``path`` contains a ``.git`` entry."""
    return (Path(path) / ".git").exists()


def _walk(directory: Path):
    if not directory.is_dir():
        return
    for child in directory.iterdir():
        if not child.is_dir():
            continue
        if is_git_repository(child):
            yield child
        elif not child.name.startswith("."):
            yield from _walk(child)


def find_git_repositories(path: str | PathLike[str]) -> list[Path]:
    """Find ``path`` itself and repositories below it, skipping hidden directories.

    The search does not descend into repositories it has found below ``path``.
    """
    root = Path(path)
    repos = [root] if is_git_repository(root) else []
    repos.extend(_walk(root))
    return repos