"""Setup script for the roster graph project."""

from setuptools import find_packages, setup

setup(
    name="roster-graph",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "polars>=0.20.0",
        "kedro>=0.19.0",
        "networkx>=3.0",
        "graphviz>=0.20",
        "matplotlib>=3.7",
        "tqdm>=4.65",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.0.265",
        ],
    },
    python_requires=">=3.11",
    description="Player graphs from team rosters: path statistics, representatives and similarity",
)
