[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytracer"
version = "0.1.0"
description = "Tuples, colours, canvases and PPM output for a small ray tracer, with a projectile demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "graphics", "ppm", "canvas", "vector"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raytracer-projectile = "raytracer.projectile:main"

[tool.hatch.build.targets.wheel]
packages = ["raytracer"]

[tool.pytest.ini_options]
addopts = "-ra"
