[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jadwaldokter"
version = "0.1.0"
description = "Monthly doctor shift rostering from a CSV roster, with an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "roster", "shifts", "doctors", "hospital"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jadwaldokter = "jadwaldokter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jadwaldokter"]

[tool.pytest.ini_options]
addopts = "-ra"
