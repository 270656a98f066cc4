[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "cardtable"
version = "0.1.0"
description = "Standard playing cards, decks with cuts and riffle shuffles, and a terminal game of War"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "playing cards", "deck", "shuffle", "war", "card game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cardtable-war = "cardtable.war:main"

[tool.setuptools.packages.find]
include = ["cardtable*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
