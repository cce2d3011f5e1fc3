from setuptools import setup, find_packages

setup(
    name="rangetree",
    version="0.1.0",
    packages=find_packages(include=['rangetree', 'rangetree.*']),
    install_requires=[
        'numpy>=1.21.0',
        'pyyaml>=5.4.1',
        'matplotlib>=3.4.3',
        'pandas>=1.3.0',
        'seaborn>=0.11.2'
    ],
    extras_require={
        'tests': [
            'pytest>=7.0'
        ]
    },
    author="George Jiang, Xiang Fu",
    description="Range sum segment tree with step-through visualization",
    python_requires='>=3.8',
)
