[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zen"
version = "1.0.0"
description = "Job definitions for Python scripts on a cron schedule, stored in SQLite and served over an HTTP JSON API."
requires-python = ">=3.10"
keywords = ["scheduler", "cron", "jobs", "http", "api", "sqlite", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zen = "zen.server:main"

[tool.hatch.build.targets.wheel]
packages = ["zen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
