[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyistubgen"
version = "0.9.2"
description = "Generate Python typing stub files (*.pyi) from collected type metadata of extension modules"
requires-python = ">=3.11"
dependencies = []
keywords = ["stubs", "pyi", "typing", "type hints", "code generation", "extension modules"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pyistubgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
strict = true
