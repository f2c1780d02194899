[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trantorkit"
version = "1.5.24"
description = "Small utilities: 64-bit byte-order conversion, string splitting and a multi-producer single-consumer queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "byte-order", "split", "queue", "mpsc"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trantorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
