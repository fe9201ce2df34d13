from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs',
    'pymongo',
]

setup(
    name='tokenledger',
    version=__version__,
    description='Fungible-token ledger with balances, allowances, issuance and burning.',
    packages=find_packages(include=['tokenledger', 'tokenledger.*']),
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
