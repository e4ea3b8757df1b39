# setup.py
from setuptools import setup, find_packages

setup(
    name="loom",
    version="0.1.0",
    description="Reader and evaluator for the Loom dialogue scripting language",
    packages=find_packages(include=["loom", "loom.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
