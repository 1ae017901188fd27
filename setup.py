"""
Build script for the bytekit project.
"""

# std
import os
import sys
import site

# third-party
from setuptools import Command, find_packages, setup


# ---------------------------------------------------------------------------- #
# allow editable user installs
# see: https://github.com/pypa/pip/issues/7953
site.ENABLE_USER_SITE = ('--user' in sys.argv[1:])


# Setuptools
# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='bytekit',
    version='0.1.0',
    description='Extended operations on immutable 8-bit byte strings.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'bytekit': ['config.yaml']},
    install_requires=[
        'loguru',
        'more-itertools',
        'platformdirs',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={'clean': CleanCommand}
)
