[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mushroom_dungeon"
version = "0.1.0"
description = "A small top-down 2D arcade game about a mushroom in a dungeon, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "2d", "pygame", "top-down", "shooter"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mushroom-dungeon = "mushroom_dungeon.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mushroom_dungeon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
