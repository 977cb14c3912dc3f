[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelinvaders"
version = "0.1.0"
description = "A small fixed-screen space shooter with pixel-art sprites, drawn into a framebuffer."
requires-python = ">=3.10"
keywords = ["game", "arcade", "space invaders", "shooter", "pygame", "pixel art"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelinvaders = "pixelinvaders.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelinvaders"]

[tool.pytest.ini_options]
addopts = "-ra"
