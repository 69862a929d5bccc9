[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgrunner"
version = "1.0.0"
description = "Manage commands that run in the background"
requires-python = ">=3.10"
dependencies = []
keywords = ["background", "process", "daemon", "cli", "runner"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
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
runner = "bgrunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bgrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
