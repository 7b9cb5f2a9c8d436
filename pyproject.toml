[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sclgui"
version = "0.1.0"
description = "Toolkit-independent widget logic: springs, easing curves, Fluent-style theme palettes and input state machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "animation", "spring", "easing", "theme", "fluent", "widgets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sclgui"]

[tool.hatch.build.targets.sdist]
include = ["sclgui", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
