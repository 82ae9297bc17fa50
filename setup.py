# setup.py
from setuptools import setup, find_packages

setup(
    name="type-schema",               # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),   # will find type_schema/
    install_requires=["pandas", "numpy"],
    python_requires=">=3.10",
    description="Runtime type checks and nested-schema validation for plain Python data",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
