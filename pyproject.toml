[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slugrace"
version = "1.0.0"
description = "A betting-style slugcat race: racers bounce around a map with pixel-perfect collisions until one reaches the food."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "race", "simulation", "pygame", "collision"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slugrace = "slugrace.game:main"

[tool.hatch.build.targets.wheel]
packages = ["slugrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
