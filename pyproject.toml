[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mushroomhunt"
version = "0.1.0"
description = "A small arcade game: walk a forest clearing, pick edible mushrooms, avoid poisonous ones."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "mushrooms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mushroomhunt = "mushroomhunt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mushroomhunt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
