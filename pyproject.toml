[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldx"
version = "0.1.0"
description = "An asyncio reader-writer lock container and declarative attribute-argument parsing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["rwlock", "asyncio", "arguments", "attributes", "parsing", "builder"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["fieldx"]

[tool.pytest.ini_options]
addopts = "-ra"
