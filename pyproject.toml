[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "setcookie"
version = "0.1.0"
description = "Parse and format HTTP Set-Cookie header values"
requires-python = ">=3.10"
dependencies = []
keywords = ["cookie", "set-cookie", "http", "header", "parser"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
setcookie-example = "setcookie.example:main"

[tool.hatch.build.targets.wheel]
packages = ["setcookie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
