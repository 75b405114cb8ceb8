[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "furnace"
version = "0.1.0"
description = "Minecraft launcher core: instances, components, library validation and launch command building"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "launcher", "maven", "classpath"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
furnace = "furnace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["furnace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
