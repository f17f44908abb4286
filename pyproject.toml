[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expokit"
version = "0.1.0"
description = "Small worked examples: describable objects, generic holders, a person-keyed mapping, a doubly linked list and thread coordination helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["examples", "linked-list", "threading", "protocols", "teaching"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
expokit-describe = "expokit.describe:main"
expokit-generics = "expokit.generics:main"
expokit-bits = "expokit.bits:main"
expokit-list-demo = "expokit.demo:main"
expokit-threads = "expokit.concurrency:main"

[tool.hatch.build.targets.wheel]
packages = ["expokit"]

[tool.hatch.build.targets.sdist]
include = ["expokit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
