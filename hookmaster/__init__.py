"""Git hooks driven by githooks.toml, with ticket-aware commit messages."""

__version__ = "0.1.0"