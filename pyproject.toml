[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clashtui"
version = "0.1.0"
description = "Building blocks for a terminal dashboard of a Clash proxy server: styled text, a cell buffer, footers, sparklines, movable lists, events and logging."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["tui", "terminal", "clash", "proxy", "dashboard", "sparkline"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["clashtui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
