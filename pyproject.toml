[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railbooking"
version = "0.1.0"
description = "A small interactive train ticket reservation system"
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "tickets", "reservation", "booking", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
railbooking = "railbooking.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["railbooking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
