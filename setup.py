import os

from setuptools import setup, find_packages
from os import path

NAME = 'satiter'
DESCRIPTION = 'SAT solving and model enumeration for CNF formulas.'
REQUIRES_PYTHON = '>=3.9.0'
VERSION = "0.1.0"

# What packages are required for this module to be executed?
REQUIRED = [
    'numpy', 'pysmt', 'python-sat', 'z3-solver'
]

# What packages are optional?
EXTRAS = {
    'test': ['pytest'],
}

here = os.path.abspath(os.path.dirname(__file__))

with open(path.join(here, "README.md")) as ref:
    long_description = ref.read()

setup(
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type="text/markdown",
    license='MIT',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    python_requires=REQUIRES_PYTHON,
    packages=find_packages(exclude=('test', 'test.*', 'examples')),
    zip_safe=False,
    install_requires=REQUIRED,
    extras_require=EXTRAS,
    tests_require=["pytest"],
    entry_points={
        'console_scripts': ['satiter=satiter.cli.cli:cli'],
    },
)
