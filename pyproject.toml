[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopekit"
version = "0.1.0"
description = "Building blocks for a small oscilloscope: mixed-radix FFT, button debouncing, a 128x128 LCD frame buffer and command-stream model, and screen drawing"
requires-python = ">=3.10"
dependencies = []
keywords = ["oscilloscope", "fft", "lcd", "framebuffer", "debounce", "st7735", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scopekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
