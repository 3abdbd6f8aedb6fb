[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pwentropy"
version = "1.0.0"
description = "Estimate password strength in bits of entropy and reject weak passwords with advice on how to improve them"
requires-python = ">=3.10"
dependencies = []
keywords = ["password", "entropy", "validation", "strength", "security"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pwentropy"]

[tool.hatch.build.targets.sdist]
include = ["pwentropy", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
