#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
setup.py for table2geojson package
"""

from setuptools import setup, find_packages

setup(
    name="table2geojson",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.0.0",
        "geojson>=2.5.0",
        "psutil>=5.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'table2geojson=table2geojson.cli:main',
        ],
    },
)
