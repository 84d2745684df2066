[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "florakit"
version = "0.1.0"
description = "A small widget toolkit drawn with pygame: box and text widgets, row and column layout, and an event queue."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gui", "widgets", "layout", "pygame", "ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
florakit = "florakit.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["florakit"]

[tool.pytest.ini_options]
addopts = "-ra"
