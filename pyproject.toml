[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charcoder"
version = "0.1.0"
description = "Show the UTF-8, UTF-16 and Unicode code of every character in a text, and re-encode text files between UTF-8 and GBK"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "utf-8", "utf-16", "gbk", "encoding", "text", "converter", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
charcoder = "charcoder.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["charcoder"]

[tool.pytest.ini_options]
addopts = "-ra"
