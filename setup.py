#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for Auto MOC Linker.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="auto_moc_linker",
    version="0.1.0",
    description="Link tagged Obsidian notes into their Maps of Content",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "python-dotenv>=0.19.0",
        "pyyaml>=6.0",
        "tqdm>=4.61.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "auto-moc-linker=auto_moc_linker.main:main",
        ],
    },
)
