[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radarhub"
version = "0.1.0"
description = "Host-side model and network plumbing for a sweeping ultrasonic radar unit"
requires-python = ">=3.10"
keywords = ["radar", "ultrasonic", "udp", "serial", "telemetry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["radarhub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
