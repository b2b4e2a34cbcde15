[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Small worked exercises: sequence and mapping drills, design patterns, sockets and threads"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "design-patterns",
    "observer",
    "visitor",
    "flyweight",
    "sockets",
    "threading",
    "containers",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
drillbox-expand-vector = "drillbox.expand_vector:main"
drillbox-bounded-list = "drillbox.bounded_list:main"
drillbox-flyweight = "drillbox.flyweight:main"
drillbox-observer = "drillbox.observer:main"
drillbox-visitor = "drillbox.visitor:main"
drillbox-sequences = "drillbox.sequences:main"
drillbox-mappings = "drillbox.mappings:main"
drillbox-diagonal = "drillbox.diagonal:main"
drillbox-client = "drillbox.client:main"
drillbox-server = "drillbox.server:main"
drillbox-workers = "drillbox.workers:main"
drillbox-hello = "drillbox.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
