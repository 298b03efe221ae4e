[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipecalc"
version = "0.1.0"
description = "Calculator workers that stream operands and results over named pipes to a shared monitor"
requires-python = ">=3.10"
dependencies = []
keywords = ["fifo", "named-pipe", "calculator", "ipc", "monitor", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipecalc-adder = "pipecalc.worker:adder_main"
pipecalc-subtractor = "pipecalc.worker:subtractor_main"
pipecalc-multiplier = "pipecalc.worker:multiplier_main"
pipecalc-divider = "pipecalc.worker:divider_main"
pipecalc-monitor = "pipecalc.monitor:main"

[tool.hatch.build.targets.wheel]
packages = ["pipecalc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
