"""
Setup shim for lazyseq, for tools that still call ``setup.py`` directly.

All package metadata, including the README, lives in pyproject.toml.
"""

from setuptools import setup

setup()
