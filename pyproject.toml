[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "mazecompare"
version = "0.1.0"
description = "Generate weighted mazes and compare Dijkstra, bucket-queue and A* shortest-path search side by side."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "pathfinding", "dijkstra", "a-star", "bucket-queue", "shortest-path", "visualization", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
mazecompare = "mazecompare.app:main"

[tool.setuptools.packages.find]
include = ["mazecompare*"]

[tool.pytest.ini_options]
addopts = "-ra"
