#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

import pathlib

from setuptools import find_packages, setup

readme = pathlib.Path(__file__).parent.joinpath("README.rst").read_text()

requirements = [
    "atpublic",
    "pydot",
    "tabulate",
    "toolz",
    "typing_extensions",
]

setup(
    author="Phillip Cloud",
    author_email="cpcloud@gmail.com",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
    ],
    description="Membership sets over the full IPv4 address space",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    license="Apache Software License 2.0",
    long_description=readme,
    include_package_data=True,
    keywords="ipv4set",
    name="ipv4set",
    packages=find_packages(include=["ipv4set", "ipv4set.*"]),
    version="0.1.0",
    zip_safe=False,
    python_requires=">=3.8",
)
