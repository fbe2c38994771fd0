[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aurakit"
version = "0.1.0"
description = "Application framework building blocks: events, versions, update checks, configuration, directories, file watching and inter-process communication."
requires-python = ">=3.10"
dependencies = []
keywords = ["application", "framework", "events", "version", "updater", "configuration", "ipc", "file-watcher"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aurakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
