#!/usr/bin/env python3

from setuptools import find_packages, setup

version = {}
with open("./hypothesis_semver/_version.py") as f:
    exec(f.read(), version)

with open("./README.md") as f:
    long_description = f.read()

setup(
    name="hypothesis-semver",
    version=version["__version__"],
    license="Apache-2.0",
    description="Hypothesis strategies for Semantic Versioning 2.0.0 versions and requirements",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["test", "test.*"]),
    platforms="any",
    python_requires=">=3.9",
    install_requires=[
        "hypothesis>=6.70.0",
        "icontract>=2.6.0",
        "semantic_version>=2.10.0",
    ],
    extras_require={
        "dev": [
            "flake8",
            "black",
            "isort",
            "pytest",
            "pytest-cov",
            "coverage[toml]",
            "interrogate",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Framework :: Hypothesis",
        "Topic :: Software Development :: Testing",
    ],
)
