[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ibcfrec"
version = "0.1.0"
description = "Item-based collaborative filtering rating prediction with cosine similarity"
requires-python = ">=3.10"
dependencies = []
keywords = ["recommender", "collaborative-filtering", "cosine-similarity", "ratings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ibcfrec = "ibcfrec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ibcfrec"]

[tool.pytest.ini_options]
addopts = "-ra"
