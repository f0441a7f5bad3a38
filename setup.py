""" elglib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import elglib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=elglib.name,
    version=elglib.__version__,
    license=elglib.__license__,
    author=elglib.__author__,
    author_email=elglib.__author_email__,
    description="A library for ElGamal signature analysis",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elgamal digital-signature discrete-logarithm baby-step-giant-step "
        "nonce-recovery modular-arithmetic cryptography"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
