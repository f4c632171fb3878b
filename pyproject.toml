[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dados"
version = "0.1.0"
description = "Homogeneous transforms, Bezier trajectories and OBJ/PLY mesh models for simulating thrown dice"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["geometry", "bezier", "mesh", "obj", "ply", "transforms", "dice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dados"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
