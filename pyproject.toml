[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfcgame"
version = "2.70.0"
description = "Building blocks for 2D games on pygame: drawing with a bottom-left origin, streamed text, a pausable game clock, sound players, key codes and byte-order helpers."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "2d", "graphics", "sound", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gfcgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
