[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycube"
version = "0.1.0"
description = "A small grid-based raycasting first-person viewer driven by .cub scene files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "xpm", "pygame", "dda", "minimap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycube = "raycube.app:main"

[tool.hatch.build.targets.wheel]
packages = ["raycube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
