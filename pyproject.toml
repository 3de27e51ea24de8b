[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstlab"
version = "1.0.0"
description = "Binary search tree exercises: random integers and Wi-Fi router records, with interactive console programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "bst", "education", "data structures"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstlab-digits = "bstlab.digits_cli:main"
bstlab-routers = "bstlab.routers_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bstlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
