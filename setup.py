from setuptools import setup

setup(
    name='wrapped',
    version='0.1.0',
    description='Single-value wrapper with call-chain style combinators.',
    packages=['wrapped'],
    package_dir={'': 'src'},
    package_data={'wrapped': ['py.typed']},
    python_requires='>=3.11',
    install_requires=[
        'termcolor',
    ],
    extras_require={
        'dev': [
            'mypy',
            'pycodestyle',
            'pytest',
        ],
    },
)
