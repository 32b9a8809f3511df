# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='normalforms',
    version='0.1.0',
    description="Normal forms of first-order formulas in Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        include=['normalforms', 'normalforms.*']
    ),
    python_requires='>=3.11',
    install_requires=[
        'ipython',
        'sympy',
        'typing_extensions'
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
