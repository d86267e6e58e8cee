#!/usr/bin/env python3

import re
from pathlib import Path
from setuptools import setup, find_packages

def version():
    init = Path(__file__).with_name('shuntyard') / '__init__.py'
    return re.search(r"^__version__ = '([^']+)'", init.read_text(), re.MULTILINE)[1]

setup(
    name='shuntyard',
    version=version(),
    author='jaseg',
    author_email='gerbonara@jaseg.de',
    description='Shunting-yard conversion and evaluation of integer arithmetic token sequences',
    long_description=Path('README.md').read_text(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    install_requires=['click'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'shuntyard = shuntyard.cli:cli',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'License :: OSI Approved :: Apache Software License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Software Development :: Interpreters',
        'Topic :: Utilities',
    ],
    keywords='shunting-yard rpn postfix expression evaluator',
    python_requires='>=3.10',
)
