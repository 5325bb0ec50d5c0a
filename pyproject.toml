[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbsfiles"
version = "0.1.0"
description = "Read and write the on-disk record files of a PTT-style BBS: favourites, article headers, login history and file paths."
requires-python = ">=3.10"
dependencies = []
keywords = ["bbs", "ptt", "big5", "favorites", "fileheader", "fnv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: BBS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bbsfiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
