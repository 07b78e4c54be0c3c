from setuptools import find_packages, setup


extras_require = {}

extras_require["test"] = [
    'pytest>=7.4.3'
]

extras_require["all"] = [
    *extras_require["test"],
]


setup(
    name='barkingmad',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT',
    description='A Human value object and a fake data helper to populate it',
    entry_points={
        'console_scripts': [
            'barkingmad = barkingmad.cli:main',
        ],
    },
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=[
        'Faker>=19.0.0',
        'python-dotenv>=1.0.0,<2.0'
    ],
    extras_require=extras_require,
    python_requires=">=3.10"
)
