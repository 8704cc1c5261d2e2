# coding: utf-8
from setuptools import find_packages, setup


with open('README.md', encoding='utf8') as file:
    long_description = file.read()

setup(
    name='topgg-client',
    version='1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.9',
    license='MIT',
    description='Python Top.gg API client with sync and async methods',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=[
        'httpx',
        'requests',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
