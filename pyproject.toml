[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpsarena"
version = "0.1.0"
description = "A terminal rock-paper-scissors arena where pieces convert the ones they beat."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["game", "terminal", "rock-paper-scissors", "ansi", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rpsarena = "rpsarena.main:main"

[tool.hatch.build.targets.wheel]
packages = ["rpsarena"]

[tool.pytest.ini_options]
addopts = "-ra"
