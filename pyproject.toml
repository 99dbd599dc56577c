[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bombhunter"
version = "0.1.0"
description = "A small arcade game: drop bombs on passing enemies before the timer runs out."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "bomb"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
bombhunter = "bombhunter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bombhunter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
