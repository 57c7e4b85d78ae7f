[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vextra"
version = "0.1.0"
description = "Permission-checked array slots, bounded immutable trees, and helpers for locating verification tools and reading a cargo workspace"
requires-python = ">=3.11"
dependencies = []
keywords = ["verification", "tree", "toolchain", "array", "workspace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vextra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
