[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calist"
version = "0.1.0"
description = "A typed, deep-copying array list with type descriptors for copying, comparing and printing items"
requires-python = ">=3.10"
dependencies = []
keywords = ["list", "array", "container", "data-structure", "generic"]
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

[project.scripts]
calist-demo = "calist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["calist"]

[tool.pytest.ini_options]
addopts = "-ra"
