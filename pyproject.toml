[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iqnotifier"
version = "0.4.1"
description = "Core of a desktop notification daemon: notification model, modifiers, popup placement, history and themes"
requires-python = ">=3.10"
keywords = ["notifications", "desktop", "notification-daemon", "popup", "themes"]
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
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["iqnotifier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
