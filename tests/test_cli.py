from pathlib import Path

import pytest

from hookmaster.cli import Command, UsageError, command_help, main, parse_args
from hookmaster.config import GitHooksConfig


def test_parse_add():
    verbose, command = parse_args(["add", "some/path"])
    assert verbose is False
    assert command == Command("add", path=Path("some/path"))


def test_parse_verbose_init():
    verbose, command = parse_args(["-v", "init"])
    assert verbose is True
    assert command == Command("init")


def test_parse_verbose_long_after_command():
    verbose, command = parse_args(["init", "--verbose"])
    assert verbose is True
    assert command.name == "init"


def test_parse_run_passes_remaining_args():
    _, command = parse_args(["run", "pre-commit", "a", "b"])
    assert command.hook_name == "pre-commit"
    assert command.args == ("a", "b")


def test_parse_prepare_commit_msg_optional_args():
    _, short = parse_args(["prepare-commit-msg", "MSG"])
    assert short.commit_msg_file == Path("MSG")
    assert short.commit_source is None
    assert short.commit_sha is None

    _, full = parse_args(["prepare-commit-msg", "MSG", "message", "abc"])
    assert (full.commit_source, full.commit_sha) == ("message", "abc")


def test_parse_prepare_commit_msg_too_many_args():
    with pytest.raises(UsageError, match="Unexpected argument"):
        parse_args(["prepare-commit-msg", "MSG", "a", "b", "c"])


def test_parse_add_missing_path():
    with pytest.raises(UsageError, match="Missing required argument: PATH"):
        parse_args(["add"])


def test_parse_run_missing_hook_name():
    with pytest.raises(UsageError, match="Missing required argument: HOOK_NAME"):
        parse_args(["run"])


def test_parse_init_rejects_extra_args():
    with pytest.raises(UsageError, match="Unexpected argument"):
        parse_args(["init", "extra"])


def test_parse_no_command():
    with pytest.raises(UsageError, match="No command specified"):
        parse_args([])


def test_parse_unknown_command():
    with pytest.raises(UsageError, match="Unknown command: 'frobnicate'"):
        parse_args(["frobnicate"])


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out.strip() == "hookmaster 0.1.0"


def test_global_help(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["-h"])
    assert info.value.code == 0
    assert "USAGE:" in capsys.readouterr().out


def test_help_for_subcommand(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--help", "run"])
    assert "hookmaster run <HOOK_NAME> [ARGS]..." in capsys.readouterr().out


def test_help_for_unknown_subcommand(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--help", "bogus"])
    assert "Unknown command: bogus" in capsys.readouterr().err


def test_command_help_lookup():
    assert "hookmaster add <PATH>" in command_help("add")
    assert command_help("bogus") is None


def test_main_without_command_fails(capsys):
    assert main([]) == 1
    assert "No command specified" in capsys.readouterr().err


def test_main_run_without_config_succeeds(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["run", "pre-commit"]) == 0


def test_main_run_failing_hook(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    GitHooksConfig({"pre-commit": "exit 2"}).save_to_file("githooks.toml")
    assert main(["run", "pre-commit"]) == 1
    assert "Error: Hook 'pre-commit' failed with exit code: 2" in capsys.readouterr().err


def test_main_add_installs_hooks(tmp_path, capsys):
    (tmp_path / "repo" / ".git").mkdir(parents=True)
    assert main(["-v", "add", str(tmp_path)]) == 0
    assert (tmp_path / "repo" / ".git" / "hooks" / "pre-push").exists()
    out = capsys.readouterr().out
    assert "Adding hookmaster hooks to repositories under" in out


def test_main_init_creates_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["init"]) == 0
    assert GitHooksConfig.load().hooks == GitHooksConfig.create_sample().hooks