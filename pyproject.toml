[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "submarine"
version = "0.1.0"
description = "SCALE decoding, Rust type-name sanitising and a JSON-RPC websocket client for Substrate-style chains"
requires-python = ">=3.10"
keywords = ["scale", "substrate", "codec", "json-rpc", "websocket", "decoder", "rust-types"]
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
]
dependencies = [
    "websocket-client",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["submarine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
