[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aos2save"
version = "1.0.0"
description = "Terminal editor and binary tools for Acceleration of SUGURI 2 save files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "aos2",
    "savegame",
    "save-editor",
    "binary-format",
    "terminal",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: Microsoft :: Windows",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aos2-save-editor = "aos2save.app:main"
aos2-easydiff = "aos2save.easydiff:main"

[tool.hatch.build.targets.wheel]
packages = ["aos2save"]

[tool.hatch.build.targets.sdist]
include = ["aos2save", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
