[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airmirror"
version = "1.70.0"
description = "Building blocks of an AirPlay mirroring and audio-streaming receiver: feature flags, DMAP metadata, volume mapping, PIN display, pairing register, clock alignment and stream dumps"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "airplay",
    "mirroring",
    "raop",
    "dmap",
    "screen-mirroring",
    "audio-streaming",
]
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
    "Topic :: Multimedia :: Video :: Display",
    "Topic :: Multimedia :: Sound/Audio",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["airmirror"]

[tool.hatch.build.targets.sdist]
include = [
    "airmirror",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
