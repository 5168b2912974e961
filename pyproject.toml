[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttkjson"
version = "2.8.0"
description = "JSON serialization with configurable indentation, plus logging and text-location helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "serializer", "indentation", "logging"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ttkjson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
