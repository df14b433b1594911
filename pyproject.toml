[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eterium"
version = "0.1.0"
description = "A small top-down role-playing adventure: walk a knight through two worlds, meet a wizard and hear about the Eterium."
requires-python = ">=3.10"
keywords = ["game", "rpg", "pygame", "adventure", "pixel-art"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
eterium = "eterium.app:main"

[tool.hatch.build.targets.wheel]
packages = ["eterium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
