[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xsdgraph"
version = "0.1.0"
description = "Build a semantic graph of types, elements and attributes from XML Schema documents"
requires-python = ">=3.10"
keywords = ["xml", "xsd", "xml-schema", "semantic-graph"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Markup :: XML",
]
dependencies = [
    "lxml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xsdgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
