[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuletide"
version = "0.1.0"
description = "Solvers for advent-style programming puzzles: a tiny 3-bit computer, grid path-finding, towel patterns, race-track cheats, secret numbers, LAN parties and locks."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "puzzles",
    "advent",
    "path-finding",
    "memoization",
    "simulation",
    "graphs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yuletide-day17 = "yuletide.day17:main"
yuletide-day18 = "yuletide.day18:main"
yuletide-day19 = "yuletide.day19:main"
yuletide-day20 = "yuletide.day20:main"
yuletide-day22 = "yuletide.day22:main"
yuletide-day23 = "yuletide.day23:main"
yuletide-day25 = "yuletide.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["yuletide"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
