[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kafkawire"
version = "0.1.0"
description = "Kafka wire-protocol building blocks: primitive codecs, gzip and framed snappy compression, key partitioning and consumer assignments"
requires-python = ">=3.10"
dependencies = []
keywords = ["kafka", "protocol", "codec", "snappy", "gzip", "partitioner", "xxhash"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kafkawire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
