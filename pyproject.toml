[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Classic programming drills as a small Python library: patterns, strings, stacks, brackets, heaps, prefix sums, multistage graphs and prime sieves."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "data-structures",
    "stack",
    "heap",
    "prefix-sums",
    "sieve",
    "dynamic-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbook-text = "drillbook.text:main"
drillbook-stack = "drillbook.stack:main"
drillbook-brackets = "drillbook.brackets:main"
drillbook-prefix = "drillbook.prefix:main"
drillbook-multistage = "drillbook.multistage:main"
drillbook-sieve = "drillbook.sieve:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
