#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

readme = open('README.rst').read()
version = (0, 3, 0)


setup(
    name='scritto',
    python_requires=">=3.10",
    version=".".join(map(str, version)),
    description='Formats notes as lilypond text within a hierarchical rhythmic structure',
    long_description=readme,
    packages=[
        'scritto',
    ],
    install_requires=[
        "quicktions",
        "jinja2",

        # Own libraries
        "emlib>=1.14.1",
        "configdict>=2.10.0",
        "pitchtools>=1.12.0",
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'scritto=scritto.cli:main',
        ],
    },
    license="LGPLv2",
    zip_safe=False,
    classifiers=[
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Multimedia :: Sound/Audio'
    ],
    include_package_data=True,
    package_data={'scritto': ['templates/*.j2']},
)
