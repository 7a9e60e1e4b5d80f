#!/usr/bin/env python3
"""
LRU Arena Cache Setup Script
============================
Allows installation of the lrucache package.

Usage:
    pip install -e .           # Development install
    pip install -e ".[test]"   # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="lru-arena-cache",
    version="1.0.0",
    description="Fixed-capacity LRU cache with O(1) get/put over an index-linked arena",
    packages=find_packages(include=["lrucache", "lrucache.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
)
