[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kl"
version = "0.1.0"
description = "Small utility library: base64 codecs, memory-mapped file views, zipped ranges, enum reflection and signals/slots"
requires-python = ">=3.10"
dependencies = []
keywords = ["base64", "mmap", "enum", "reflection", "signal", "slot", "zip", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
