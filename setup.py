#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

PYEVM_DEPENDENCY = "py-evm>=0.10.0b1"


deps = {
    'exits': [
        "argcomplete>=1.12.2",
        "eth-hash[pycryptodome]>=0.5.1",
        "eth-typing>=3.0.0",
        "eth-utils>=2.0.0",
        PYEVM_DEPENDENCY,
        "rlp>=3.0.0",
        "termcolor>=1.1.0",
        "trie>=2.0.0",
    ],
    'test': [
        "factory-boy>=3.2.0",
        "hypothesis>=6.0.0",
        "pytest>=7.0.0",
        "pytest-cov>=2.11.1",
        "pytest-xdist>=2.0.0",
    ],
    'lint': [
        "flake8>=6.0.0",
        "flake8-bugbear>=23.0.0",
        "mypy>=1.0.0",
    ],
    'dev': [
        "bumpversion>=0.5.3,<1",
        "wheel",
        "setuptools>=36.2.0",
        "tox>=4.0.0",
        "twine",
    ],
}

deps['dev'] = (
    deps['dev'] +
    deps['exits'] +
    deps['test'] +
    deps['lint']
)


install_requires = deps['exits']


with open('./README.md') as readme:
    long_description = readme.read()


setup(
    name='triggerable-exits',
    # *IMPORTANT*: Don't manually change the version here. Use the 'bumpversion' utility.
    version='0.1.0-alpha.1',
    description='Execution layer triggerable validator exits: exit queue, fee market and '
                'block validation',
    long_description=long_description,
    long_description_content_type='text/markdown',
    include_package_data=True,
    python_requires=">=3.8,<4",
    install_requires=install_requires,
    extras_require=deps,
    license='MIT',
    zip_safe=False,
    keywords='ethereum blockchain evm validator exits',
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    entry_points={
        'console_scripts': [
            'triggerable-exits=triggerable_exits.cli:main',
        ],
    },
)
