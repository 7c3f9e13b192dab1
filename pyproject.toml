[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyquery"
version = "0.1.0"
description = "Skyline queries over product catalogues: find the products no other product beats on both price and rating."
requires-python = ">=3.10"
dependencies = []
keywords = ["skyline", "pareto", "dominance", "products", "csv", "query"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skyquery = "skyquery.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skyquery"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
