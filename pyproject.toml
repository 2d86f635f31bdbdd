[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessboard"
version = "0.1.0"
description = "A resizable chess board viewer that reads and writes piece placement in FEN notation"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chess", "fen", "board", "pygame"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chessboard = "chessboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chessboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
