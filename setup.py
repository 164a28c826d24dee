"""Setup script for Competitor Discovery."""

from setuptools import setup, find_packages

setup(
    name="competitor-discovery",
    version="0.1.0",
    description="Industry classification and competitor discovery for website reports",
    author="AEO Live",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "httpx>=0.25.0",
        "click>=8.1.0",
        "rich>=13.6.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "competitor-discovery=competitor_discovery.cli:main",
        ],
    },
    python_requires=">=3.10",
)
