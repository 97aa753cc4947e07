[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questiondraw"
version = "1.0.0"
description = "Draw interview questions at random from two per-group question banks, with a Tk desktop interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["interview", "questions", "lottery", "exam", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
questiondraw = "questiondraw.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["questiondraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
