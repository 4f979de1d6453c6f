[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gapedit"
version = "0.1.0"
description = "A small graphical text editor built on gap buffers"
requires-python = ">=3.10"
keywords = ["text editor", "gap buffer", "pygame", "editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gapedit = "gapedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gapedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
