[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linuxplay"
version = "0.1.0"
description = "Small command-line tools (ls, grep, wc), a threaded file logger and a minimal JSON parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "grep", "wc", "logger", "json", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.scripts]
linuxplay-ls = "linuxplay.ls:main"
linuxplay-grep = "linuxplay.grep:main"
linuxplay-wc = "linuxplay.wc:main"
linuxplay-logger-demo = "linuxplay.logger:main"
linuxplay-json-demo = "linuxplay.json_example:main"

[tool.hatch.build.targets.wheel]
packages = ["linuxplay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
