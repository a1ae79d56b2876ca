[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "assetbundle"
version = "0.1.0"
description = "Reader for UnityFS, UnityRaw and UnityWeb asset bundle files"
requires-python = ">=3.10"
dependencies = [
    "lz4",
]
keywords = ["unity", "assetbundle", "unityfs", "binary", "parser"]
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
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
assetbundle = "assetbundle.scheme:main"

[tool.hatch.build.targets.wheel]
packages = ["assetbundle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
