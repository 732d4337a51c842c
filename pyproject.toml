[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirezero"
version = "1.7.1"
description = "Low-level building blocks for the protocol buffer wire format: varints, zigzag, byte order, views, buffers and packed ranges."
requires-python = ">=3.10"
dependencies = []
keywords = ["protobuf", "protocol buffers", "varint", "zigzag", "wire format", "serialization"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wirezero"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
