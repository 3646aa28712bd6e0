[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skylinekit"
version = "0.1.0"
description = "Skyline rectangle packing and Win32-style keyboard and mouse message decoding helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["rectangle packing", "skyline", "texture atlas", "virtual key", "keyboard", "mouse"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skylinekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
