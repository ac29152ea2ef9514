from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'flowharness',
    version = '0.1.0',
    description = 'Configuration and validation harness for property-driven dataflow components',
    packages = find_packages(include=['flowharness', 'flowharness.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov']
    }
)
