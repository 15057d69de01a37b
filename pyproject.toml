[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xpmkit"
version = "0.1.0"
description = "Read XPM pixmap images into plain pixel data, with the X11 colour name table"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "pixmap", "image", "x11", "colors"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xpmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
