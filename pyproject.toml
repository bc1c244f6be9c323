[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperbench"
version = "0.1.0"
description = "Building blocks for command benchmarks: options, statistics, parameter scans, duration formatting and result exporters"
requires-python = ">=3.10"
dependencies = [
    "tqdm",
]
keywords = ["benchmark", "statistics", "outliers", "markdown", "asciidoc", "csv", "json"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hyperbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
