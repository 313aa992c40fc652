[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizkit"
version = "1.0.0"
description = "Small building blocks: sums and lookups, 3D vector distances, a player registry, a binary search tree and a threaded matchmaking coordinator."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "matchmaking", "vectors", "players", "registry"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizkit = "quizkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
