[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moeassets"
version = "0.1.0"
description = "Bundle a directory of asset files into a Windows resource script and a C++ resource registry"
requires-python = ">=3.10"
keywords = ["resources", "assets", "windres", "rc", "build", "embedding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: C++",
    "Topic :: Software Development :: Build Tools",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
moeassets = "moeassets.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["moeassets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
