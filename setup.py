#!/usr/bin/env python
"""Setup configuration for FHIR Explorer."""

from setuptools import find_packages, setup

setup(
    name="fhir-explorer",
    version="1.0.0",
    description="Conformance and performance testing framework for FHIR servers",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
        "jinja2>=3.1.0",
        "defusedxml>=0.7.1",
        "fhirclient>=4.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.1",
        ],
    },
    entry_points={
        "console_scripts": [
            "fhir-explorer-test=fhir_explorer.main:main",
        ],
    },
)
