"""Installs hooks into repositories and runs the configured hook commands."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from hookmaster.commit_msg import CommitMessageError, CommitMessageProcessor
from hookmaster.config import CONFIG_FILE_NAME, ConfigError, GitHooksConfig
from hookmaster.git_hooks import GitHook, find_git_repositories, is_git_repository


class HookError(Exception):
    """Raised when a hookmaster operation fails."""


class HookManager:
    """Ties together hook installation, configuration and commit messages."""

    def __init__(self, commit_processor: CommitMessageProcessor | None = None) -> None:
        self._commit_processor = commit_processor or CommitMessageProcessor()

    def add_hooks_to_path(self, path: str | PathLike[str]) -> list[Path]:
        """Install the standard hooks into every repository under ``path``.

        Returns the repositories that received hooks.
        """
        root = Path(path)
        try:
            repositories = find_git_repositories(root)
        except OSError as exc:
            raise HookError(
                f"Failed to find git repositories under: {root}"
            ) from exc

        if not repositories:
            print(f"No git repositories found under: {root}", file=sys.stderr)
            return []

        print(f"Found {len(repositories)} git repositories")
        for repo in repositories:
            print(f"Installing hooks to: {repo}")
            self.install_hooks_to_repo(repo)

        print("Successfully installed hooks to all repositories")
        return repositories

    def install_hooks_to_repo(self, repo_path: str | PathLike[str]) -> list[Path]:
        """Install the standard hooks into one repository; return the script paths."""
        repo = Path(repo_path)
        installed = []
        for hook in GitHook.standard_hooks():
            try:
                installed.append(hook.install_to_repo(repo))
            except OSError as exc:
                raise HookError(
                    f"Failed to install {hook.filename} hook to {repo}"
                ) from exc
        return installed

    def init_repository(self) -> bool:
        """Create a sample githooks.toml in the working directory.

        Also installs hooks when the working directory is a repository.
        Returns False when a configuration already existed.
        """
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            print(
                f"{CONFIG_FILE_NAME} already exists, skipping initialization",
                file=sys.stderr,
            )
            return False

        try:
            GitHooksConfig.create_sample().save_to_file(config_path)
        except ConfigError as exc:
            raise HookError(f"Failed to create sample {CONFIG_FILE_NAME}") from exc
        print(f"Created sample {CONFIG_FILE_NAME}")

        try:
            current_dir = Path.cwd()
        except OSError as exc:
            raise HookError("Failed to get current directory") from exc

        if is_git_repository(current_dir):
            self.install_hooks_to_repo(current_dir)
            print("Installed hooks to current repository")
        else:
            print(
                "Current directory is not a git repository, hooks not installed",
                file=sys.stderr,
            )
        return True

    def run_hook(self, hook_name: str, args: Sequence[str] = ()) -> bool:
        """Run the shell command configured for ``hook_name``.

        Returns True if a command ran, False if the hook has no command.
        Raises HookError when the command cannot start or exits non-zero.
        """
        try:
            config = GitHooksConfig.load()
        except ConfigError as exc:
            raise HookError(f"Failed to load {CONFIG_FILE_NAME}") from exc

        if not config.has_active_hook(hook_name):
            return False

        command = config.get_hook_command(hook_name)
        if command is None:
            raise HookError(f"Hook '{hook_name}' not found in configuration")

        if sys.platform == "win32":
            invocation = ["cmd", "/C", command]
        else:
            invocation = ["sh", "-c", command]

        try:
            result = subprocess.run(invocation, check=False)
        except OSError as exc:
            print(f"Failed to execute hook '{hook_name}': {exc}", file=sys.stderr)
            raise HookError(f"Failed to execute hook '{hook_name}': {exc}") from exc

        if result.returncode != 0:
            code = result.returncode if result.returncode > 0 else -1
            message = f"Hook '{hook_name}' failed with exit code: {code}"
            print(message, file=sys.stderr)
            raise HookError(message)
        return True

    def prepare_commit_msg(
        self,
        commit_msg_file: str | PathLike[str],
        commit_source: str | None = None,
        commit_sha: str | None = None,
    ) -> None:
        """Handle the prepare-commit-msg hook."""
        try:
            self._commit_processor.process_commit_msg_file(
                commit_msg_file, commit_source, commit_sha
            )
        except CommitMessageError as exc:
            raise HookError("Failed to process commit message") from exc