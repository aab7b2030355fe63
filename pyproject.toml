[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chibitools"
version = "0.1.0"
description = "Asset tools for a small RGB565 game engine: PNG to binary image conversion, game file access and ideograph collection"
requires-python = ">=3.10"
keywords = ["rgb565", "image", "converter", "game", "assets", "embedded"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
chibitools = "chibitools.tools:main"

[tool.hatch.build.targets.wheel]
packages = ["chibitools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
