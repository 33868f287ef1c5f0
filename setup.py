# setup.py
from setuptools import setup, find_packages

setup(
    name="mylisp",
    version="0.0.5",
    description="A small Lisp interpreter with S-expressions and Q-expressions",
    packages=find_packages(include=["mylisp", "mylisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
