"""Setup configuration for the jigsaw-board package."""

from setuptools import find_packages, setup

setup(
    name="jigsaw-board",
    version="0.1.0",
    packages=find_packages(include=["jigsaw_board", "jigsaw_board.*"]),
    install_requires=[
        "numpy",
        "pillow",
        "pydantic",
        "pydantic-settings",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
            "isort",
        ],
    },
)
