[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kgplayer"
version = "0.1.0"
description = "Core of a local music player: track library, LRC lyrics, liked/local/recent pages and a playlist model"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "player", "lyrics", "lrc", "playlist"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kgplayer = "kgplayer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kgplayer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
