[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dandesite"
version = "0.1.3"
description = "A personal blog site: Markdown posts with YAML front matter rendered to JSON and served as HTML pages."
requires-python = ">=3.10"
keywords = ["blog", "static-site", "markdown", "front-matter", "prism"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "mistune>=3.0",
    "pyyaml>=6.0",
    "brotli>=1.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
dandesite-generate = "dandesite.generator:main"
dandesite = "dandesite.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dandesite"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
