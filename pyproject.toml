[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keploy-contract"
version = "0.1.0"
description = "Contract testing tool that turns recorded HTTP exchanges into OpenAPI-style schemas and validates consumer mocks against provider tests"
requires-python = ">=3.10"
keywords = ["contract-testing", "openapi", "mocks", "api", "testing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]
dependencies = [
    "click>=8.0",
    "pyyaml>=6.0",
    "tabulate>=0.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
keploy = "keploy_contract.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["keploy_contract"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
