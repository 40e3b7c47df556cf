[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "camweb"
version = "1.1.0"
description = "Building blocks for streaming a camera to the web: object properties, video source listeners and command line settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["camera", "video", "mjpeg", "streaming", "webcam", "raspberry-pi", "v4l"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["camweb"]

[tool.hatch.build.targets.sdist]
include = ["camweb", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
