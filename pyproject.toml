[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadkit"
version = "0.1.0"
description = "Road geometry toolkit: Fresnel integrals, clothoid spirals, polylines, ground points and OSM elements"
requires-python = ">=3.10"
dependencies = []
keywords = ["road", "spiral", "clothoid", "fresnel", "polyline", "geometry", "openstreetmap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roadkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
