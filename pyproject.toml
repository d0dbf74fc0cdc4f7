[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mceoperator"
version = "0.1.0"
description = "MultiClusterEngine resource model, component overrides and legacy monitoring lookups"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "multicluster", "operator", "custom-resource"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mceoperator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
