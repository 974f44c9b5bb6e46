[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ocmadm"
version = "0.1.0"
description = "Offline helpers for multicluster hub administration tools: version bundles, preflight checks, tree, table and YAML printers, spinners, resource requirements and CRD status summaries."
requires-python = ">=3.10"
keywords = ["kubernetes", "multicluster", "cluster-management", "hub", "klusterlet", "preflight"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ocmadm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
