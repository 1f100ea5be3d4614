[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scriptdoc"
version = "0.1.0"
description = "Generate and sort reStructuredText documentation stubs for GSC script functions and methods"
requires-python = ">=3.10"
dependencies = []
keywords = ["documentation", "rst", "gsc", "scripting", "sphinx"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scriptdoc = "scriptdoc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scriptdoc"]

[tool.pytest.ini_options]
addopts = "-ra"
