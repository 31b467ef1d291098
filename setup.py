#!/usr/bin/env python3
"""
Setup script for AZSwitch
"""

from setuptools import setup, find_packages
import os
import re


def read_file(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding='utf-8') as f:
        return f.read()


# Version lives in azswitch/__init__.py; read it without importing PyQt5
__version__ = re.search(
    r"^__version__ = ['\"]([^'\"]+)['\"]", read_file('azswitch/__init__.py'), re.MULTILINE
).group(1)

setup(
    name='azswitch',
    version=__version__,
    description='AZERTY to QWERTY translator - type QWERTY text on an AZERTY keyboard',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'docs']),
    python_requires='>=3.8',
    install_requires=[
        'PyQt5',         # Text window and key events
        'python-xlib',   # Caps Lock state at startup
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    entry_points={
        'gui_scripts': [
            'azswitch=azswitch.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Utilities',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Environment :: X11 Applications :: Qt',
    ],
)
