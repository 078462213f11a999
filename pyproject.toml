[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mphmap"
version = "0.1.0"
description = "Minimal perfect hash functions (BDZ) and a hash map built on top of them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "minimal perfect hash",
    "perfect hashing",
    "bdz",
    "hash map",
    "murmurhash3",
    "hypergraph",
]
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
mphmap = "mphmap.cli:main"
mphmap-bench = "mphmap.bm_map:main"

[tool.hatch.build.targets.wheel]
packages = ["mphmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
