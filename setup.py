#!/usr/bin/env python3

from setuptools import setup, find_packages


setup(name='linked_map_set',
      version='0.1.0',
      description='Insertion ordered set backed by a value linked index',
      packages=find_packages(exclude=('tests', 'tests.*')),
      install_requires=[
          'pyyaml',
      ],
      extras_require={
          'test': [
              'pytest',
          ],
      },
      )
