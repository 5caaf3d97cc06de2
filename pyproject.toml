[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdeschat"
version = "0.1.0"
description = "A toy encrypted chat: Diffie-Hellman key exchange feeding a Simplified DES cipher over TCP"
requires-python = ">=3.10"
dependencies = []
keywords = ["sdes", "simplified-des", "diffie-hellman", "cryptography", "education", "chat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sdeschat-client = "sdeschat.client:main"
sdeschat-server = "sdeschat.server:main"

[tool.hatch.build.targets.wheel]
packages = ["sdeschat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
