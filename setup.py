#!/usr/bin/env python3
"""
Setup script for the locale-registry package
"""

from setuptools import setup, find_packages

setup(
    name="locale-registry",
    version="0.1.0",
    description="Bidirectional registry of translation files keyed by display name and language tag",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        # 📋 Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",

        # 🌐 Locale data (CLDR)
        "Babel>=2.12.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "locale-registry=locale_registry.cli:main",
        ],
    },
    package_data={
        "locale_registry": ["py.typed"],
    },
)
