[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aquasense"
version = "0.1.0"
description = "Water-quality sensing for aquaculture: temperature, TDS, pH and dissolved-oxygen readings, framed as serial payload lines and turned into JSON telemetry messages."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "water quality",
    "aquaculture",
    "tds",
    "ph",
    "dissolved oxygen",
    "telemetry",
    "sensors",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Hydrology",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aquasense = "aquasense.node:main"

[tool.hatch.build.targets.wheel]
packages = ["aquasense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
