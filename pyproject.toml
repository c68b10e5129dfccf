[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resampix"
version = "0.1.0"
description = "Pure Python image resampling building blocks: filters, convolution coefficients, one-axis convolution and alpha premultiplication."
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "resize", "resampling", "convolution", "lanczos", "alpha", "premultiply"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["resampix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
