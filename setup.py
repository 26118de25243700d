from setuptools import setup, find_packages
import os

setup(
    name="LINALGtools",
    version="0.1.0",
    description="A toolkit (JIT compiled) for dense eigenvalue extraction and complex matrix products",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["LINALGtools", "LINALGtools.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        # Core scientific computing dependencies
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        # JIT compilation and parallelization
        "numba>=0.56.0",
        "joblib>=1.0.0",
    ],
    extras_require={
        # Test tooling
        "test": [
            "pytest>=7.0",
        ],
    },
    zip_safe=False,
)
