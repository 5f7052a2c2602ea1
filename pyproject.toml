[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moosekernel"
version = "0.0.5"
description = "A simulated toy kernel: VGA text terminal, scancode keyboard handling, an in-memory file system and a small shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["kernel", "shell", "terminal", "vga", "filesystem", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
moosekernel = "moosekernel.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["moosekernel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
