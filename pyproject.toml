[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chuvalerta"
version = "0.1.0"
description = "Rain and water-level alert station model with an SSD1306 framebuffer and a 5x5 LED matrix"
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "rain", "flood", "alert", "ssd1306", "led-matrix", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chuvalerta = "chuvalerta.station:main"

[tool.hatch.build.targets.wheel]
packages = ["chuvalerta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
