#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Program DOCX Compiler - Setup Configuration
Enables optional dependency groups for the HTTP API and development.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]

# Optional dependencies for the HTTP API
api_requirements = [
    "fastapi>=0.110.0",
    "uvicorn>=0.27.0",
]

setup(
    name="program-docx",
    version="1.0.0",
    description="Compile educational program documents with embedded tables to Word",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Program DOCX Team",
    python_requires=">=3.9",
    packages=find_packages(include=["config", "program_docx", "program_docx.*", "ai_providers", "api"]),
    py_modules=["export_program"],
    install_requires=requirements,
    extras_require={
        # HTTP API
        "api": api_requirements,

        # Development dependencies
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ] + api_requirements,

        # All optional features
        "all": api_requirements,
    },
    entry_points={
        "console_scripts": [
            "program-docx=export_program:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Topic :: Office/Business :: Office Suites",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="docx word markdown tables education curriculum",
)
