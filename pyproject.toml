[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "panelconf"
version = "0.1.0"
description = "Configuration model and surface bookkeeping for a desktop panel and dock"
requires-python = ">=3.10"
dependencies = []
keywords = ["panel", "dock", "desktop", "wayland", "layer-shell", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["panelconf"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
