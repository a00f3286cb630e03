[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forgecore"
version = "0.1.0"
description = "Core building blocks for a game engine: logging, memory tracking, containers, events, input and 3D math."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "events", "input", "linear-algebra", "quaternion", "allocator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["forgecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
