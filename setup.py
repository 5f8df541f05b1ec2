# setup.py
from setuptools import setup, find_packages

setup(
    name="pico",
    version="0.1.0",
    description="A small Lisp interpreter core: reader, evaluator and builtin registry",
    packages=find_packages(include=["pico", "pico.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["pico=pico.repl:main"],
    },
    zip_safe=False,
)
