[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nettools"
version = "0.1.0"
description = "Hardware and protocol address handling, kernel table readers and a multicast address command for Linux networking"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "arp", "multicast", "hardware address", "routing", "ax25"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ipmaddr = "nettools.ipmaddr:main"

[tool.hatch.build.targets.wheel]
packages = ["nettools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
