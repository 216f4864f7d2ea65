from setuptools import find_namespace_packages, setup

setup(
    name="treefs",
    version="0.1.0",
    description="In-memory fake file tree and recorded mock filesystem for tests",
    python_requires=">=3.11",
    packages=find_namespace_packages(include=["treefs", "treefs.*"]),
    install_requires=[
        "result>=0.17",
        "rich>=13.7",
        "typer>=0.12",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    entry_points={
        "console_scripts": [
            "treefs=treefs.cli.app:cli",
        ],
    },
)
