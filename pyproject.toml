[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alman"
version = "0.1.0"
description = "A command-line tool for managing shell aliases with suggestions drawn from your command history"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "alias", "shell", "command-line", "history"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
alman = "alman.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["alman"]

[tool.pytest.ini_options]
addopts = "-ra"
