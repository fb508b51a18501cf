[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catshooter"
version = "0.1.0"
description = "Engine-independent game logic for a small side-scrolling shooter: sprites, bullets, effects, meshes, camera and input state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "side-scrolling", "sprites", "camera", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["catshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
