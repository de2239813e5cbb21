# hookmaster

Some nice git hooks for your pleasure.

hookmaster installs small shell hooks into your git repositories. Each hook
calls back into the `hookmaster` command, which looks up the command to run
in a `githooks.toml` file in the current working directory. Git runs hooks
from the top of the work tree, so that is where the file belongs. The
`prepare-commit-msg` hook also pre-fills an empty commit message from the
branch name.

The hook scripts call `hookmaster` by name, so it has to be on the `PATH`
of whoever runs git.

## Installation

```
pip install .
```

## Usage

Create a sample `githooks.toml` in the current directory and, if the
directory is a git repository, install the hooks into it. Nothing happens
if `githooks.toml` already exists:

```
hookmaster init
```

Install hooks into every git repository found under a directory. The
directory itself counts if it is a repository; hidden directories are
skipped, and the search does not go inside repositories it finds:

```
hookmaster add ~/projects
```

Run the command configured for a hook by hand:

```
hookmaster run pre-commit
```

Fill in a commit message file the way the installed hook does:

```
hookmaster prepare-commit-msg .git/COMMIT_EDITMSG
```

The hooks installed are `pre-commit`, `prepare-commit-msg`, `commit-msg`,
`post-commit` and `pre-push`. Existing hook scripts with those names are
overwritten. On POSIX systems the scripts are made executable (mode 755).

Options: `-h`/`--help`, `-V`/`--version`, `-v`/`--verbose`. Use
`hookmaster --help <command>` for help on a single command. Errors are
printed to standard error and the command exits with status 1.

## githooks.toml

Plain `key = value` lines. Lines that start with `#` are comments. Values
may be double-quoted (where `\"` and `\\` are unescaped), single-quoted
(taken literally) or bare. An empty value disables the hook.

```
commit-msg = ""
pre-commit = "cargo fmt --check && cargo clippy -- -D warnings"
pre-push = "cargo test"
```

Keys cannot be empty or contain spaces, and every non-comment line must
contain `=`; otherwise loading fails with the offending line number.

Commands are run through `sh -c` (or `cmd /C` on Windows). A non-zero exit
status makes the hook, and so the git operation, fail. The arguments git
passes to a hook are not handed on to the configured command.

## Commit messages from branch names

When the commit message has no content yet (only blank lines and `#`
comments), `prepare-commit-msg` reads the branch name with
`git rev-parse --abbrev-ref HEAD` and puts a summary above the existing
text. A branch such as `feature/JIRA-123-add-new-feature` becomes:

```
JIRA-123: Add New Feature
```

Branch prefixes `feature/`, `bugfix/`, `hotfix/` and `fix/` are recognised;
hyphens and underscores in the description become spaces. A branch with a
ticket id but no recognised description gives just `JIRA-123: `. Branches
without a ticket id (for example `main`) are left alone.

## Library use

```python
from hookmaster.commit_msg import CommitMessageProcessor, to_title_case
from hookmaster.config import GitHooksConfig
from hookmaster.git_hooks import GitHook, find_git_repositories
from hookmaster.hook_manager import HookManager

CommitMessageProcessor().format_commit_message_from_branch("bugfix/TICKET-456-fix-bug")
# 'TICKET-456: Fix Bug'

to_title_case("hELLo WoRLd")
# 'Hello World'

config = GitHooksConfig.parse_toml('pre-push = "pytest"\n')
config.has_active_hook("pre-push")  # True
config.to_toml_string()             # 'pre-push = "pytest"\n'

GitHook.from_str("pre-commit").generate_script_content()
# '#!/bin/sh\nhookmaster run pre-commit "$@"\n'
```

`CommitMessageProcessor` takes an optional callable that returns the branch
name, in place of asking git. `HookManager` offers `add_hooks_to_path`,
`install_hooks_to_repo`, `init_repository`, `run_hook` and
`prepare_commit_msg`; failures are raised as `HookError`. Configuration
problems raise `ConfigError`, commit message problems `CommitMessageError`.