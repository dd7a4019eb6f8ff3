# -*- coding: utf-8 -*-

import os
from setuptools import find_packages, setup

with open(os.path.join(os.path.dirname(__file__), 'README.md')) as readme:
    README = readme.read()

# allow setup.py to be run from any path
os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

setup(
    name='lexistem',
    version='1.0.0',
    packages=find_packages(),
    include_package_data=True,
    license='MIT',
    description='English (Porter2) stemmer for search indexing.',
    long_description=README,
    long_description_content_type='text/markdown',
    entry_points={
          'console_scripts': [
              'lexistem = lexistem.cli:main',
          ]
      },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing :: Linguistic',
        'Topic :: Text Processing :: Indexing',
    ],
    python_requires='>=3.6',
    install_requires=['requests', 'unidecode'],
    extras_require={
        'test': ['pytest'],
    },
)
