[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stitchpaint"
version = "0.1.0"
description = "Interactive editor for drawing stitch patterns on a zoomable grid"
requires-python = ">=3.10"
keywords = ["embroidery", "stitch", "pattern", "editor", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stitchpaint = "stitchpaint.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stitchpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
