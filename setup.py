# setup.py
from setuptools import setup, find_packages

setup(
    name="ezscheme",
    version="0.1.0",
    description="A small tree-walking Scheme interpreter",
    packages=find_packages(include=["ezscheme", "ezscheme.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["ezscheme=ezscheme.repl:main"],
    },
    zip_safe=False,
)
