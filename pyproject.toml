[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hookmaster"
version = "0.1.0"
description = "Git hooks driven by a simple githooks.toml, with ticket-aware commit messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "hooks", "commit", "jira", "development"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hookmaster = "hookmaster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hookmaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
