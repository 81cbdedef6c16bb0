[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "musictheory"
version = "0.0.3"
description = "Notes, keys, chords and scales parsed from readable names"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["music", "theory", "chord", "scale", "key", "note", "pitch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
music-theory = "musictheory.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["musictheory"]

[tool.pytest.ini_options]
addopts = "-ra"
