[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beesolve"
version = "0.1.0"
description = "Solutions to a collection of classic programming-judge problems, usable as library functions and as stdin/stdout commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "exercises", "brainfuck", "strings"]
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
beesolve-consumption = "beesolve.consumption:main"
beesolve-marbles = "beesolve.marbles:main"
beesolve-pages = "beesolve.pages:main"
beesolve-substring = "beesolve.substring:main"
beesolve-interleave = "beesolve.interleave:main"
beesolve-telephone = "beesolve.telephone:main"
beesolve-brainfuck = "beesolve.brainfuck:main"
beesolve-sheep = "beesolve.sheep:main"
beesolve-paper = "beesolve.paper:main"
beesolve-staircase = "beesolve.staircase:main"
beesolve-pequi = "beesolve.pequi:main"

[tool.hatch.build.targets.wheel]
packages = ["beesolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
