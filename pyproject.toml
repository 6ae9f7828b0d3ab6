[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "channelsurf"
version = "0.11.9"
description = "Building blocks for a general purpose fuzzy finder: key handling, pickers, previews, fuzzy matching and screen layout."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "fuzzy", "preview", "tui", "terminal", "picker"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["channelsurf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
