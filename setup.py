#!/usr/bin/env python
"""
VFS - Virtual filesystem abstraction with an in-memory implementation and a generic tree walker
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Define required packages
required_packages = [
    "pydantic>=2.0.0",  # For configuration validation
    "pyyaml>=6.0",      # For configuration and layout files
    "rich>=13.5.0",     # For rich terminal output
    "tabulate>=0.9.0",  # For formatted table output
]

setup(
    name="vfs",
    version="1.0.0",
    description="A virtual filesystem abstraction with an in-memory implementation and a generic tree walker",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["vfs", "vfs.*"]),
    python_requires=">=3.8",
    install_requires=required_packages,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'vfs=vfs.cli:main',
        ],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
