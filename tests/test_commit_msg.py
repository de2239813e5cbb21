import subprocess
from unittest import mock

import pytest

from hookmaster.commit_msg import (
    CommitMessageError,
    CommitMessageProcessor,
    current_branch_name,
    to_title_case,
)


@pytest.mark.parametrize(
    "branch, expected",
    [
        ("feature/JIRA-123-add-new-feature", "JIRA-123: Add New Feature"),
        ("bugfix/TICKET-456-fix-important-bug", "TICKET-456: Fix Important Bug"),
        ("hotfix/ABC-789-urgent_fix", "ABC-789: Urgent Fix"),
        ("feature/JIRA-123", "JIRA-123: "),
        ("main", None),
        ("feature/some-feature", None),
    ],
)
def test_format_commit_message_from_branch(branch, expected):
    assert CommitMessageProcessor().format_commit_message_from_branch(branch) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "Hello World"),
        ("HELLO WORLD", "Hello World"),
        ("hELLo WoRLd", "Hello World"),
        ("single", "Single"),
        ("", ""),
    ],
)
def test_to_title_case(text, expected):
    assert to_title_case(text) == expected


def test_process_fills_comment_only_message(tmp_path):
    msg = tmp_path / "COMMIT_EDITMSG"
    msg.write_bytes(b"# Please enter a message\n")
    processor = CommitMessageProcessor(lambda: "feature/JIRA-1-do-it")
    processor.process_commit_msg_file(msg, None, None)
    assert msg.read_bytes() == b"JIRA-1: Do It\n\n# Please enter a message\n"


def test_process_leaves_existing_message(tmp_path):
    msg = tmp_path / "COMMIT_EDITMSG"
    msg.write_bytes(b"Already written\n# comment\n")
    processor = CommitMessageProcessor(lambda: "feature/JIRA-1-do-it")
    processor.process_commit_msg_file(msg, "message", None)
    assert msg.read_bytes() == b"Already written\n# comment\n"


def test_process_leaves_message_without_ticket(tmp_path):
    msg = tmp_path / "COMMIT_EDITMSG"
    msg.write_bytes(b"\n# comment\n")
    processor = CommitMessageProcessor(lambda: "main")
    processor.process_commit_msg_file(msg)
    assert msg.read_bytes() == b"\n# comment\n"


def test_process_missing_file_raises(tmp_path):
    processor = CommitMessageProcessor(lambda: "feature/JIRA-1")
    with pytest.raises(CommitMessageError, match="Failed to read"):
        processor.process_commit_msg_file(tmp_path / "missing")


def test_current_branch_name_strips_output():
    done = subprocess.CompletedProcess(args=[], returncode=0, stdout=b"feature/X-1\n", stderr=b"")
    with mock.patch("subprocess.run", return_value=done):
        assert current_branch_name() == "feature/X-1"


def test_current_branch_name_failure():
    done = subprocess.CompletedProcess(args=[], returncode=128, stdout=b"", stderr=b"not a repo")
    with mock.patch("subprocess.run", return_value=done):
        with pytest.raises(CommitMessageError, match="Git command failed: not a repo"):
            current_branch_name()


def test_current_branch_name_missing_git():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("git")):
        with pytest.raises(CommitMessageError, match="Failed to execute git command"):
            current_branch_name()