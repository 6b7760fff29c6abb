[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dfagames"
version = "0.1.0"
description = "Rules and move generation for chess, Ataxx, Breakthrough and Amazons, with bitboard helpers and two-argument boolean function analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "ataxx", "breakthrough", "amazons", "board games", "move generation", "bitboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dfagames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
