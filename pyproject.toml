[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crcforge"
version = "1.3.0"
description = "Table-driven CRC calculation with a catalogue of standard 8, 16, 32 and 64-bit presets"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc", "checksum", "crc8", "crc16", "crc32", "crc64", "lookup-table"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crcforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
