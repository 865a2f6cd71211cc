[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "civicdesk"
version = "0.1.0"
description = "File-backed records and services for small desk applications: art auctions, parcel delivery, road reports, patient intake and volunteering."
requires-python = ">=3.10"
dependencies = []
keywords = ["auction", "delivery", "patients", "volunteering", "observer", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["civicdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
