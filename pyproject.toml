[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterheap"
version = "0.1.0"
description = "Heap-based iterator helpers: k-way merging, k smallest elements and a lazy buffer."
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "heap", "merge", "kmerge", "k-smallest", "lazy"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["iterheap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
