from mypyc.build import mypycify
from setuptools import setup

setup(
    name="quadint",
    version="0.1.0",

    # errors.py, config.py and utils.py stay interpreted: they hold the exception
    #   classes, the environment lookup and the generator cache, none of which is hot.
    packages=["quadint"],

    ext_modules=mypycify([
        "quadint/__init__.py",
        "quadint/ring.py",
        "quadint/quad.py",
        "quadint/remainder.py",
        "quadint/gcd.py",
        "quadint/ntheory.py",
        "quadint/algebraic.py",
    ]),

    python_requires=">=3.9",
    install_requires=["sympy"],
    extras_require={"test": ["pytest"]},

    license="MIT",
)
