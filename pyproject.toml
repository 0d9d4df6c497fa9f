[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glmath"
version = "0.1.0"
description = "Vectors, quaternions, transform and projection matrices, coordinate conversions and Bezier curves for 3D graphics"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "opengl", "vector", "quaternion", "matrix", "bezier", "projection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
