[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortlab"
version = "0.1.0"
description = "Insertion sort and merge sort variants, with a random-input generator and a timing harness"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "insertion sort", "merge sort", "algorithms", "teaching", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
sortlab-demo = "sortlab.people:main"
sortlab-random = "sortlab.randominput:main"
sortlab-bench = "sortlab.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["sortlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
