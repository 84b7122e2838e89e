"""
Setup script for the zerocoin accumulator package.
"""

from pathlib import Path

from setuptools import setup, find_packages

here = Path(__file__).parent

with open(here / "requirements-dev.txt", "r") as f:
    dev_requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

setup(
    name="zerocoin-accumulator",
    version="0.1.0",
    description="RSA accumulator, Pedersen commitments and coin minting for zerocoin-style anonymous coins",
    packages=find_packages(include=["zerocoin", "zerocoin.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dotenv>=1.0",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
