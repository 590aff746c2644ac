[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonmatch"
version = "0.2.1"
description = "Structural comparison of JSON values with readable, path-aware difference reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "testing", "diff", "comparison"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonmatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
