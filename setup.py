# setup.py
from setuptools import setup, find_packages

setup(
    name="elysp",
    version="0.1.0",
    description="A small Lisp interpreter: reader, macro expander and evaluator",
    packages=find_packages(include=["elysp", "elysp.*"]),
    package_data={"elysp": ["prelude/std/*.lisp"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["elysp=elysp.__main__:main"],
    },
    zip_safe=False,
)
