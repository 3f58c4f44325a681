[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventview"
version = "0.1.0"
description = "Browse, filter and import system event logs from Windows event channels, syslog files and XML or CSV exports"
requires-python = ">=3.10"
dependencies = []
keywords = ["event log", "event viewer", "syslog", "wevtutil", "logging", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eventview = "eventview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["eventview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
