[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kswitch"
version = "1.0.0"
description = "Switch KDE Plasma between light and dark themes from the command line"
requires-python = ">=3.11"
keywords = ["kde", "plasma", "theme", "dark-mode", "konsole", "wallpaper"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: K Desktop Environment (KDE)",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kswitch = "kswitch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kswitch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
