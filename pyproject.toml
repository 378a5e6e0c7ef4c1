[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravitysim"
version = "0.1.0"
description = "A 2D n-body gravity sandbox with a wandering sun, an orbiting moon and a ghost that follows the camera"
requires-python = ">=3.10"
keywords = ["gravity", "n-body", "simulation", "pygame", "sandbox", "perlin"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gravitysim = "gravitysim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gravitysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
