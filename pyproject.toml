[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nonlocalfem"
version = "0.1.0"
description = "Building blocks for local and nonlocal finite element models: symbolic shape functions, reference elements, mesh geometry, 1D boundary conditions and influence functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finite elements",
    "nonlocal",
    "heat conduction",
    "influence function",
    "symbolic differentiation",
    "mesh",
    "vtk",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nonlocalfem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
