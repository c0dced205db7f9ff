[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecsdeploy"
version = "0.1.0"
description = "Helpers for deploying Compose projects to Amazon ECS: GPU machine selection, template marshalling, option checks and sidecar tools"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["ecs", "compose", "cloudformation", "aws", "deployment", "containers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecsdeploy-resolv = "ecsdeploy.resolv:main"
ecsdeploy-secrets = "ecsdeploy.secrets:main"

[tool.hatch.build.targets.wheel]
packages = ["ecsdeploy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
