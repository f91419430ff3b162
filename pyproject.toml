[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neonufft"
version = "0.1.0"
description = "Building blocks for non-uniform fast Fourier transforms: kernel parameters, z-order comparison, strided host arrays, FFT grids and a block-parallel thread pool."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["nufft", "fft", "fourier", "non-uniform", "numerics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["neonufft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
