[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizcli"
version = "0.1.0"
description = "A small multiple-choice quiz game for ANSI terminals"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "game", "terminal", "ansi", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizcli = "quizcli.game:main"

[tool.hatch.build.targets.wheel]
packages = ["quizcli"]

[tool.pytest.ini_options]
addopts = "-ra"
