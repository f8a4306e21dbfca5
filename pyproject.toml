[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplemenu"
version = "0.1.0"
description = "Building blocks of a handheld game launcher menu: INI and desktop-entry parsing, alias tables, input polling, layout and text drawing"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["launcher", "frontend", "emulation", "handheld", "menu", "ini", "desktop-entry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["simplemenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
