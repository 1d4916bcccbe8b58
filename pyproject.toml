[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "espcore"
version = "0.1.0"
description = "Microcontroller-style core utilities: mutable strings, print and stream helpers, a ring buffer, IPv6 addresses, MD5 and base64."
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "string", "stream", "ring-buffer", "ipv6", "md5", "base64"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["espcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
