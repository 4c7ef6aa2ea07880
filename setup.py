# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='rationals',
    version='0.1.0',
    author="The rationals developers",
    description="Exact rational numbers over arbitrary-precision integers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['rationals', 'rationals.*']),
    python_requires='>=3.11',
    install_requires=[
        'gmpy2',
        'sympy'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Operating System :: OS Independent",
    ],
)
