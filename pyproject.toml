[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixturekit"
version = "0.1.0"
description = "Builder for consistent, related seed records of a blogging domain: users, articles, comments, tags and their links"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixtures", "test data", "builder", "seed data"]
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
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fixturekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
