"""The githooks.toml configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

CONFIG_FILE_NAME = "githooks.toml"


class ConfigError(Exception):
    """Raised when the configuration cannot be read, parsed or written."""


def _parse_value(raw: str) -> str:
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return raw[1:-1].replace('\\"', '"').replace("\\\\", "\\")
    if len(raw) >= 2 and raw.startswith("'") and raw.endswith("'"):
        return raw[1:-1]
    return raw


@dataclass
class GitHooksConfig:
    """Maps hook names to the shell commands they run."""

    hooks: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse_toml(cls, content: str) -> GitHooksConfig:
        """Parse ``key = "value"`` lines, skipping blanks and comments."""
        hooks: dict[str, str] = {}
        for line_num, raw_line in enumerate(content.split("\n"), start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            key, eq, value_part = line.partition("=")
            if not eq:
                raise ConfigError(
                    f"Invalid TOML syntax on line {line_num}: '{line}'. "
                    "Expected 'key = value' format."
                )
            key = key.strip()
            if not key or " " in key:
                raise ConfigError(
                    f"Invalid key '{key}' on line {line_num}. "
                    "Keys cannot be empty or contain spaces."
                )
            hooks[key] = _parse_value(value_part.strip())
        return cls(hooks)

    @classmethod
    def load_from_file(cls, path: str | PathLike[str]) -> GitHooksConfig:
        """Read and parse a configuration file."""
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read config file: {path}") from exc
        try:
            return cls.parse_toml(content)
        except ConfigError as exc:
            raise ConfigError(f"Failed to parse {CONFIG_FILE_NAME}: {exc}") from exc

    @classmethod
    def load(cls) -> GitHooksConfig:
        """Load githooks.toml from the working directory, or an empty config."""
        path = Path(CONFIG_FILE_NAME)
        if path.exists():
            return cls.load_from_file(path)
        return cls()

    @classmethod
    def create_sample(cls) -> GitHooksConfig:
        """A starter configuration."""
        return cls(
            {
                "pre-commit": "cargo fmt --check && cargo clippy -- -D warnings",
                "pre-push": "cargo test",
                "commit-msg": "",
            }
        )

    def to_toml_string(self) -> str:
        """Render as sorted ``key = "value"`` lines with escaped values."""
        lines = []
        for key, value in sorted(self.hooks.items()):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            lines.append(f'{key} = "{escaped}"')
        return "\n".join(lines) + "\n"

    def save_to_file(self, path: str | PathLike[str]) -> None:
        """Write the configuration to ``path``."""
        path = Path(path)
        try:
            path.write_bytes(self.to_toml_string().encode("utf-8"))
        except OSError as exc:
            raise ConfigError(f"Failed to write config file: {path}") from exc

    def get_hook_command(self, hook_name: str) -> str | None:
        """The command configured for ``hook_name``, if any."""
        return self.hooks.get(hook_name)

    def has_active_hook(self, hook_name: str) -> bool:
        """True if the hook is configured with a non-blank command."""
        return bool(self.hooks.get(hook_name, "").strip())