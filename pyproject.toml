[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inflectkit"
version = "0.1.0"
description = "English word-form helpers: comparatives, superlatives, adverbs, indefinite articles and identifier case conversion."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "inflection",
    "english",
    "grammar",
    "article",
    "adverb",
    "comparative",
    "superlative",
    "snake_case",
    "camelCase",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inflectkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
