[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trantorkit"
version = "1.5.25"
description = "Small networking utilities: 64-bit byte-order conversion, string splitting, an MPSC queue and scatter reads from sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["byte order", "split", "queue", "mpsc", "readv", "socket"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trantorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
