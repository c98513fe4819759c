[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursechain"
version = "0.1.0"
description = "In-memory course progress, certificate, batch certificate and reward token ledgers for learning platforms"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "certificates", "course-progress", "ledger", "tokens"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursechain-demo = "coursechain.courses:main"

[tool.hatch.build.targets.wheel]
packages = ["coursechain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
