from setuptools import setup, find_packages
import re

# Read version from paydesk/__init__.py
with open('paydesk/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='paydesk',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'paydesk=paydesk.cli.__main__:main',
        ],
    },
    author='Personal',
    description='Login-gated console for weekly payroll calculation.',
    python_requires='>=3.10',
)
