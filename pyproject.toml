[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolve"
version = "0.1.0"
description = "Solutions to classic competitive-programming problems, with a small toolkit of reusable helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "disjoint-set",
    "union-find",
    "binary-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpsolve-bitpp = "cpsolve.bitpp:main"
cpsolve-eating-game = "cpsolve.eating_game:main"
cpsolve-elephant = "cpsolve.elephant:main"
cpsolve-football = "cpsolve.football:main"
cpsolve-social-experiment = "cpsolve.social_experiment:main"
cpsolve-team = "cpsolve.team:main"
cpsolve-trippi-troppi = "cpsolve.trippi_troppi:main"
cpsolve-watermelon = "cpsolve.watermelon:main"
cpsolve-word-abbreviation = "cpsolve.word_abbreviation:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolve"]

[tool.hatch.build.targets.sdist]
include = ["cpsolve", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["cpsolve"]
