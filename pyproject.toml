[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slitherserver"
version = "0.1.0"
description = "A UDP game server for a multiplayer snake arena with baits, growth and collisions"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "server", "udp", "snake", "multiplayer", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slitherserver = "slitherserver.server:main"

[tool.hatch.build.targets.wheel]
packages = ["slitherserver"]

[tool.pytest.ini_options]
addopts = "-ra"
