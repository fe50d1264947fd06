[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huzlip"
version = "0.1.0"
description = "Small geometry, CAD-template and utility toolkit: vectors, bounding boxes, meshes, component assemblies and helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "cad", "mesh", "vector", "aabb", "bvh", "assembly", "templates"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["huzlip"]

[tool.hatch.build.targets.sdist]
include = ["huzlip", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
