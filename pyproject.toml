[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dinoladder"
version = "0.1.0"
description = "A small ladder-climbing arcade game drawn on a simulated 128x160 RGB565 screen"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pixel", "rgb565", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dinoladder = "dinoladder.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dinoladder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
