# setup.py
from setuptools import setup, find_packages

setup(
    name="malt",
    version="0.1.0",
    description="A small Lisp interpreter with lexical closures and tail calls",
    python_requires=">=3.10",
    packages=find_packages(include=["malt", "malt.*"]),
    package_data={"malt": ["prelude/*.mal"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["malt = malt.repl:main"],
    },
    zip_safe=False,
)
