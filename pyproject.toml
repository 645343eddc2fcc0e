[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moar"
version = "0.1.0"
description = "Building blocks for a terminal pager: ANSI colours and styles, line rendering, man page headings and transparent decompression"
requires-python = ">=3.10"
keywords = ["pager", "terminal", "ansi", "less", "tty", "escape-sequences", "decompression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Text Processing :: Filters",
    "Typing :: Typed",
]
dependencies = [
    "wcwidth",
    "zstandard",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["moar"]

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
