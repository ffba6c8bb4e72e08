"""Setup file for the package."""

from setuptools import setup, find_packages

setup(
    name="tse-results-monitor",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "playwright>=1.40.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'tse-monitor=tse_monitor.main:main',
        ],
    },
    description="Follow live TSE election results for a city from the terminal",
    python_requires='>=3.10',
)
