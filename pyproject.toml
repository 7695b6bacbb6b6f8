[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "markbook"
version = "0.1.0"
description = "Line-based record storage, typed settings and nested command handling for a bookmark manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["bookmarks", "bookmark-manager", "command-line", "settings", "storage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
markbook-reference = "markbook.reference:main"

[tool.hatch.build.targets.wheel]
packages = ["markbook"]

[tool.hatch.build.targets.sdist]
include = ["markbook", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
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
