from setuptools import setup, find_packages

setup(
    name='nbv-frontiers',
    version='0.1.0',
    description='Frontier voxel clustering and camera frustum checks for next-best-view exploration',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'numpy>=1.24',
        'scipy>=1.10',
        'plotly>=5.15',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
    python_requires='>=3.8',
)
