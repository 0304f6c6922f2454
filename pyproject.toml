[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patterndemos"
version = "0.1.0"
description = "Small, runnable demonstrations of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "abstract factory",
    "adapter",
    "builder",
    "factory",
    "observer",
    "prototype",
    "singleton",
    "strategy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patterndemos-abstract-factory = "patterndemos.abstract_factory:main"
patterndemos-adapter = "patterndemos.adapter:main"
patterndemos-builder = "patterndemos.builder:main"
patterndemos-factory = "patterndemos.factory:main"
patterndemos-observer = "patterndemos.observer:main"
patterndemos-prototype = "patterndemos.prototype:main"
patterndemos-singleton = "patterndemos.singleton:main"
patterndemos-strategy = "patterndemos.strategy:main"

[tool.hatch.build.targets.wheel]
packages = ["patterndemos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
