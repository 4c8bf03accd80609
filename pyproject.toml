[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galconquest"
version = "1.0.0"
description = "A Galaga-style space shooter built on pygame: formations, diving attacks, boss captures and dual fighters."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "galaga", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
galconquest = "galconquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["galconquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
