#!/usr/bin/env python

"""The setup script."""

from setuptools import setup, find_packages

VERSION = "0.1.0"

with open("README.md") as readme_file:
    readme = readme_file.read()

requirements = [
    "pynacl",
    "rich",
]

test_requirements = [
    "pytest>=3",
]

setup(
    author="Laharah",
    author_email="laharah22@gmail.com",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    description="Recover Shamir secrets from shares written in arbitrary bases.",
    entry_points={
        "console_scripts": [
            "polysecret=polysecret.cli:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    license="MIT license",
    long_description=readme,
    long_description_content_type="text/markdown",
    include_package_data=True,
    keywords="shamir secret sharing lagrange",
    name="polysecret",
    packages=find_packages(include=["polysecret", "polysecret.*"]),
    test_suite="tests",
    tests_require=test_requirements,
    url="https://github.com/laharah/polysecret",
    version=VERSION,
    zip_safe=False,
)
