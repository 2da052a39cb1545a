[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stratus"
version = "0.1.0"
description = "Attack technique registry, lifecycle runner and documentation helpers for cloud adversary emulation"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["security", "mitre-attack", "adversary-emulation", "cloud", "detection-engineering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Information Technology",
    "Intended Audience :: System Administrators",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["stratus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
