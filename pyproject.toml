[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bumpr"
version = "0.1.0"
description = "Read, bump and write semantic versions kept in pyproject.toml, package.json, galaxy.yml and .version files"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["version", "semver", "release", "bump", "pyproject", "package.json", "galaxy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bumpr"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
