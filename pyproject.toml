[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskdemos"
version = "0.1.0"
description = "Small worked examples of everyday desktop-application tasks: table models, signals, binary streams, JSON, SQLite, XML, CSV, shared memory and a snake game."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "examples",
    "education",
    "model-view",
    "signals",
    "sqlite",
    "xml",
    "json",
    "csv",
    "snake",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskdemos-news = "deskdemos.news:main"
deskdemos-datastream = "deskdemos.datastream:main"
deskdemos-json = "deskdemos.json_settings:main"
deskdemos-students = "deskdemos.students:main"
deskdemos-bookindex = "deskdemos.bookindex:main"
deskdemos-ls = "deskdemos.filesystem:main"

[tool.hatch.build.targets.wheel]
packages = ["deskdemos"]

[tool.hatch.build.targets.sdist]
include = ["deskdemos", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
