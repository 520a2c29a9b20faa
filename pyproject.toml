[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinquote"
version = "0.1.0"
description = "Command-line tool for looking up cryptocurrency prices and market rankings from CoinGecko"
requires-python = ">=3.10"
keywords = ["cryptocurrency", "bitcoin", "prices", "coingecko", "cli", "market-cap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Utilities",
]
dependencies = [
    "requests>=2.28",
    "pyyaml>=6.0",
    "termcolor>=2.0",
    "tabulate>=0.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
crypto = "coinquote.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coinquote"]

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
ignore_missing_imports = true
