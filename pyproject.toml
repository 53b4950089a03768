[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algotxn"
version = "0.1.0"
description = "Build, encode, group and link Algorand transactions"
requires-python = ">=3.10"
keywords = ["algorand", "transaction", "msgpack", "blockchain", "atomic-transfer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "msgpack>=1.0",
    "cryptography>=41",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["algotxn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
