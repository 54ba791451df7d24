[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filehunt"
version = "0.1.0"
description = "Parallel file search by name or content, with plain-text or regular-expression patterns"
requires-python = ">=3.10"
keywords = ["search", "grep", "files", "regex", "find"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
dependencies = [
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
filehunt = "filehunt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filehunt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
