[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ncorps"
version = "1.0.0"
description = "Interactive two-dimensional N-body gravitational simulation with presets and a text-mode physics demonstration"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["n-body", "gravity", "simulation", "physics", "orbits"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ncorps = "ncorps.app:main"
ncorps-demo = "ncorps.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["ncorps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
