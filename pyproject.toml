[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lvmcsi"
version = "0.1.0"
description = "Parameter parsing, sizing, scheduling and topology logic for an LVM-backed CSI storage driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["lvm", "csi", "kubernetes", "storage", "volumes", "snapshots", "scheduler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lvmcsi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
