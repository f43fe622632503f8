[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airportsim"
version = "0.1.0"
description = "A threaded airport simulation with runways, gates, fuel tankers and passenger boarding"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "airport", "threading", "concurrency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
airportsim = "airportsim.airport:main"

[tool.hatch.build.targets.wheel]
packages = ["airportsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
