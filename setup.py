# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='logicnf',
    version='0.1.0',
    description="Step-by-step normal forms of first-order formulas",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        include=['logicnf', 'logicnf.*']
    ),
    python_requires='>=3.11',
    install_requires=[
        'IPython',
        'typing_extensions'
    ],
    extras_require={
        'test': [
            'pytest',
            'sympy'
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
