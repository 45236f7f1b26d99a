[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelresample"
version = "0.1.0"
description = "Separable convolution resampling passes and alpha premultiplication in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "resample", "convolution", "lanczos", "filter", "alpha", "premultiply"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelresample"]

[tool.pytest.ini_options]
addopts = "-ra"
