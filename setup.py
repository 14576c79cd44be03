#!/usr/bin/env python
import logging
from pathlib import Path

from setuptools import find_packages, setup

DEPENDENCIES = {
    'aprslib>=0.7.0': [],
    'geojson': [],
    'humanize': [],
    'python-dateutil': [],
    'pyyaml': [],
    'typepigeon<2': [],
    'typer': [],
}

try:
    from dunamai import Version

    version = Version.from_any_vcs().serialize()
except (ImportError, RuntimeError) as error:
    logging.exception(error)
    version = '0.0.0'

logging.info(f'using version {version}')

README = Path(__file__).parent / 'README.md'
if README.exists():
    long_description = README.read_text()
else:
    long_description = ''

setup(
    name='dumpogn',
    version=version,
    author='dumpogn developers',
    description='decoder and formatter for the OGN APRS-IS feed of the Open Glider Network',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.8',
    setup_requires=['dunamai', 'setuptools>=41.2'],
    install_requires=list(DEPENDENCIES),
    extras_require={
        'testing': ['pytest', 'pytest-cov', 'pytest-xdist'],
        'development': ['dunamai', 'flake8', 'isort', 'oitnb', 'wheel'],
    },
    entry_points={'console_scripts': ['dumpogn=dumpogn.__main__:main']},
)
