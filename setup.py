from setuptools import find_packages, setup

setup(
    name='algorand-asset-manager',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',

    entry_points={
        'console_scripts': [
            'asset-manager=asset_manager.__main__:main',
        ],
    },
    install_requires=[
        'py-algorand-sdk>=2.0,<3',
        'click>=8.0',
        'flask>=2.0',
        'flasgger',
        'flask-marshmallow',
        'marshmallow>=3.13',
        'gevent',
        'pluggy',
        'prometheus-client',
        'pyyaml',
        'redis',
        'structlog',
        'waitress',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
