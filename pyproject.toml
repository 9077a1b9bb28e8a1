[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcphttp"
version = "0.1.0"
description = "Incremental HTTP/1.1 request parsing over raw byte streams, with a small TCP listener and UDP line sender"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "tcp", "udp", "parser", "request", "headers"]
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
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcphttp-listener = "tcphttp.tcplistener:main"
tcphttp-udpsender = "tcphttp.udpsender:main"

[tool.hatch.build.targets.wheel]
packages = ["tcphttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
