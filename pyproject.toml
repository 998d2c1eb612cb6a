[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenekit3d"
version = "0.1.0"
description = "Vector and matrix math, shapes, light data, debug line batching and scene management for small 3D engines"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "math", "vector", "matrix", "scene", "graphics", "catmull-rom"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scenekit3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
