[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-systems lab exercises: processes, IPC, threads, synchronisation, CPU scheduling and deadlock handling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "scheduling",
    "synchronization",
    "ipc",
    "threads",
    "deadlock",
    "bankers-algorithm",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.pytest.ini_options]
addopts = "-ra"
