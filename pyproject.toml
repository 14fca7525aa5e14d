[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdwiki"
version = "0.1.3"
description = "Read local Markdown notes into records of frontmatter, headings and first paragraph."
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "wiki", "notes", "frontmatter", "headings"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mdwiki"]

[tool.pytest.ini_options]
addopts = "-ra"
