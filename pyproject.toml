[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zenggectl"
version = "0.1.0"
description = "Command-line controller and protocol helpers for Zengge (LEDnetWF) Bluetooth LED strips"
requires-python = ">=3.10"
dependencies = []
keywords = ["zengge", "lednetwf", "led", "bluetooth", "ble", "rgb", "hsv", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zengge-led-ctl = "zenggectl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zenggectl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
