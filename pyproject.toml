[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "micromaze"
version = "0.1.0"
description = "Micromouse maze solvers (depth-first and breadth-first) that drive a line-protocol maze simulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["micromouse", "maze", "robot", "dfs", "bfs", "path-planning", "simulator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
micromaze-mouse = "micromaze.mouse:main"
micromaze-bfs = "micromaze.bfs:main"

[tool.hatch.build.targets.wheel]
packages = ["micromaze"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["micromaze"]
