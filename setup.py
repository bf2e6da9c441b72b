"""Setup script for wysycs package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = ""
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="wysycs-dashboard",
    version="1.0.0",
    description="Forest health and wildfire dashboard for community forests in Peru, using NASA NDVI and VIIRS data",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "wysycs": ["locales/*.yaml"],
    },
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.28.0",
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "shapely>=2.0.0",
        "pyyaml>=6.0",
        "python-dotenv>=1.0.0",
        "streamlit>=1.33.0",
        "folium>=0.15.0",
        "streamlit-folium>=0.18.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "wysycs=wysycs.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: GIS",
    ],
    keywords="gis forest wildfire ndvi viirs firms dashboard streamlit peru",
)
