[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multisort"
version = "0.1.0"
description = "Sort integers from many files in parallel worker threads and merge them into one sorted output file"
requires-python = ">=3.10"
dependencies = []
keywords = ["sort", "quicksort", "merge", "threads", "integers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
multisort = "multisort.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["multisort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
