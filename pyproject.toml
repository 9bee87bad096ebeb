[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gosu"
version = "0.1.0"
description = "Chart and replay readers, input keys, value handlers, layout geometry and a chart list store for a rhythm game"
requires-python = ">=3.10"
keywords = ["rhythm-game", "osu", "beatmap", "replay", "osr", "chart"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "msgpack",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gosu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
