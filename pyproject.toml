[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "audiokit"
version = "0.1.0"
description = "Audio signal tools: FFT, spectrum analysis and terminal spectrograms, a binary spectrogram file format, tone synthesis and network sample packing."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "sound", "fft", "spectrogram", "synthesis", "oscillator", "pcm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["audiokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
