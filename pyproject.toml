[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "panoview"
version = "0.1.0"
description = "Camera, sphere mesh, frustum, shader-file and ring-buffer helpers for a 360-degree panorama viewer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["360", "panorama", "camera", "frustum", "sphere", "mesh", "ring buffer", "opengl", "quaternion"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["panoview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
