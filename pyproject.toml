[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webget"
version = "0.1.0"
description = "Fetch a web page over a plain TCP connection with a minimal HTTP/1.1 GET request"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "tcp", "socket", "client", "get"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
webget = "webget.client:main"

[tool.hatch.build.targets.wheel]
packages = ["webget"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
