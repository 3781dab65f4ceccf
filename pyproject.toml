[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kairos"
version = "1.0.0"
description = "Timing utilities: durations, pausable stopwatches, countdown timers, fixed timesteps, FPS counting and event sequence playback."
requires-python = ">=3.10"
dependencies = []
keywords = ["time", "timer", "stopwatch", "timestep", "fps", "game loop", "sequencer"]
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
packages = ["kairos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
