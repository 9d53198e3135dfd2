[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms in plain Python: string matching, convolutions, number theory, shortest paths, dominator trees, dancing links, network flow and Li Chao trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "kmp",
    "z-function",
    "manacher",
    "burrows-wheeler",
    "fft",
    "ntt",
    "walsh-hadamard",
    "spfa",
    "max-flow",
    "min-cost-flow",
    "dominator-tree",
    "dancing-links",
    "li-chao-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-tree-jumps = "algokit.lichao:main"
algokit-rectangles = "algokit.rectangles:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
