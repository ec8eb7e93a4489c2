[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata_kit"
version = "0.1.0"
description = "Small puzzle solutions: big-integer strings, number tricks, text transforms, sequence helpers and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["kata", "puzzles", "exercises", "strings", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["kata_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
