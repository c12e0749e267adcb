[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelcraft"
version = "0.1.0"
description = "Gray and RGB image filters, ASCII rendering and least-significant-bit message hiding"
requires-python = ">=3.10"
keywords = ["image", "filters", "steganography", "mosaic", "gaussian", "emboss", "ascii-art"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelcraft = "pixelcraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
