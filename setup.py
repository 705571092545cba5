#!/usr/bin/env python
# -*- encoding: utf-8 -*-

import pathlib

from setuptools import find_packages
from setuptools import setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()


setup(
    name='rcv_tally',
    version='0.1.0',
    description='Tabulate instant-runoff elections from ranked ballots in a sheet export',
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={'rcv_tally': ['run_config_settings.json']},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Operating System :: Unix',
        'Operating System :: POSIX',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python :: 3',
        'Topic :: Utilities',
    ],
    python_requires='>=3.8',
    install_requires=[
        'tqdm>=4.56.0',
        'pandas>=1.2.0',
    ],
    extras_require={
        'test': ['pytest>=6.2.4'],
    },
    entry_points={
        'console_scripts': [
            'rcv-tally = rcv_tally.cli:main',
        ]
    },
)
