# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="A small Scheme-like tree-walking interpreter",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"schemer": ["prelude/*.scm"]},
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
