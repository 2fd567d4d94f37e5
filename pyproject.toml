[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspgrasp"
version = "0.1.0"
description = "GRASP-ILS heuristic for the symmetric Travelling Salesman Problem on TSPLIB instances"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "travelling salesman", "grasp", "ils", "rvnd", "heuristic", "tsplib", "optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tspgrasp = "tspgrasp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tspgrasp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
