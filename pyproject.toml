[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "povdisplay"
version = "0.1.0"
description = "Rendering building blocks for persistence-of-vision LED displays: parameters, a bitmap font, output scaling and slice effects"
requires-python = ">=3.10"
dependencies = []
keywords = ["pov", "led", "display", "persistence-of-vision", "bitmap-font", "effects"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["povdisplay"]

[tool.pytest.ini_options]
addopts = "-ra"
