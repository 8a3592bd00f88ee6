[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barshell"
version = "0.1.0"
description = "Configuration, icon glyphs, menu state and three-slot layout for a desktop status bar"
requires-python = ">=3.10"
dependencies = ["pyyaml"]
keywords = ["status bar", "wayland", "panel", "configuration", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["barshell"]

[tool.pytest.ini_options]
addopts = "-ra"
