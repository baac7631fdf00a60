[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kara"
version = "0.1.0"
description = "A tile-based dungeon adventure: find the four icons, trade with the locals and escape."
requires-python = ">=3.10"
keywords = ["game", "dungeon", "adventure", "pygame", "fog-of-war", "tile-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kara = "kara.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kara"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
