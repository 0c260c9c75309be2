[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mjrs-utils"
version = "0.1.0"
description = "Command-line helpers that generate wrapper code from MuJoCo C headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["mujoco", "code-generation", "bindings", "header", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mjrs-utils = "mjrs_utils.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mjrs_utils"]

[tool.pytest.ini_options]
addopts = "-ra"
