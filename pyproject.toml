[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agcamtools"
version = "0.1.0"
description = "Stereo backend parameters, Q4.4 disparity-to-depth conversion, neural-model tensor packing and a tiny bitmap overlay font"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["stereo", "disparity", "depth", "sgbm", "onnx", "bitmap-font", "camera"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agcamtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
