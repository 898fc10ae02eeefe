"""Setup script for the triewalk package."""

from setuptools import find_packages, setup

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="triewalk",
    version="0.1.0",
    description="A step-wise simulation of Merkle Patricia Trie walking with skip-node optimization.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["triewalk", "triewalk.*"]),
    include_package_data=True,
    install_requires=[
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21.0",
            "pre-commit>=3.0.0",
            "black",  # Code formatter
            "isort",  # Import sorting
            "flake8",  # Linting
            "mypy",  # Type checking
            "pytest-cov",  # Coverage reporting
        ],
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov",  # Coverage reporting
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
)
