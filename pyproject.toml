[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightmvc"
version = "0.1.0"
description = "Building blocks for a lightweight web server: JSON values, INI files, string helpers, TCP sockets, readiness polling and HTTP responses"
requires-python = ">=3.10"
dependencies = []
keywords = ["web", "http", "json", "ini", "sockets", "epoll", "object-pool"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lightmvc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
