from setuptools import setup, find_packages

setup(
    name="tabscope",
    version="1.0.0",
    packages=find_packages(include=["tabscope", "tabscope.*"]),
    install_requires=[
        "pandas>=2.0",
        "numpy>=1.24",
        "matplotlib>=3.7",
        "seaborn>=0.13",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
        "ui": ["streamlit>=1.30"],
    },
    entry_points={
        "console_scripts": [
            "tabscope=tabscope.cli:main",
        ],
    },
    python_requires=">=3.9",
    description="Tabular data profiling engine: column statistics, correlations and chart data from CSV text",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ]
)
