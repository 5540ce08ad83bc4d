[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starscan"
version = "0.1.0"
description = "Grayscale image workbench: scatter bright points, count pixels above a threshold and find their centroid"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["image", "grayscale", "threshold", "centroid", "star detection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
starscan = "starscan.app:main"

[tool.hatch.build.targets.wheel]
packages = ["starscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
