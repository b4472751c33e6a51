[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cuddlyui"
version = "0.1.0"
description = "Widget layout, focus handling and event routing for a small UI toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["widgets", "ui", "layout", "quadtree", "pie-menu", "utf-8", "focus"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cuddlyui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
