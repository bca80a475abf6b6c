[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vidyut"
version = "0.1.0"
description = "Sanskrit sandhi rule generation and splitting, plus Paninian sound, tag and term utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["sanskrit", "sandhi", "panini", "slp1", "linguistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vidyut-generate-rules = "vidyut.generate_rules:main"

[tool.hatch.build.targets.wheel]
packages = ["vidyut"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
