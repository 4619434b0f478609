# setup.py
from setuptools import setup, find_packages

setup(
    name="klisp",
    version="0.1.0",
    description="Reader and tree-walking evaluator for a small Lisp dialect",
    packages=find_packages(include=["klisp", "klisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["klisp=klisp.repl:main"],
    },
    zip_safe=False,
)
