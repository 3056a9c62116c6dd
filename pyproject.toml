[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfkit"
version = "1.0.0"
description = "Small building blocks: binary readers and writers, string helpers, path and version utilities, queues, a red-black tree, locks and a task queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["bytes", "queue", "red-black tree", "version", "task queue", "rwlock", "path"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
