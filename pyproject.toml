[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuikit"
version = "0.1.0"
description = "State and logic for terminal applications: key bindings, styles, layout, actions, configuration and small app state machines"
requires-python = ">=3.11"
dependencies = [
    "platformdirs",
    "pyyaml",
]
keywords = ["terminal", "tui", "keybindings", "layout", "console", "state machine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["tuikit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
