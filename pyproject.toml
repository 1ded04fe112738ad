[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sl16num"
version = "0.1.0"
description = "16-bit sign-logarithm number format with approximate arithmetic and formatting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logarithmic number system",
    "fixed point",
    "approximate arithmetic",
    "16-bit",
    "numerics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
sl16-compare = "sl16num.compare:main"

[tool.hatch.build.targets.wheel]
packages = ["sl16num"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
