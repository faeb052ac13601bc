[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphrender"
version = "0.0.1"
description = "Render a graph of audio processors along independent paths on a thread pool"
requires-python = ">=3.10"
keywords = ["audio", "processor graph", "rendering", "thread pool", "wait group"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphrender-example = "graphrender.example:main"

[tool.hatch.build.targets.wheel]
packages = ["graphrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
