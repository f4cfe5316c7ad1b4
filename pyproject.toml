[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phetemplate"
version = "0.2.28"
description = "Check the fields of tabular phenopacket curation templates and model their variants"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "GA4GH",
    "phenopacket",
    "CURIE",
    "HGVS",
    "ACMG",
    "curation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["phetemplate"]

[tool.hatch.build.targets.sdist]
include = ["phetemplate", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
