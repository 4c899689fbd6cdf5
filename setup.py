"""
Setup script for FrameGraph
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="framegraph",
    version="0.1.0",
    description="Motif finding over graphs stored as polars vertex and edge frames",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["framegraph", "framegraph.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.9",
    install_requires=[
        "polars>=1.0.0",
        "numpy>=1.20.0",
    ],
    extras_require={
        "graphblas": ["python-graphblas>=2023.1.0"],
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "framegraph-demo=main:main",
        ],
    },
    py_modules=["main"],
    include_package_data=True,
    zip_safe=False,
)
