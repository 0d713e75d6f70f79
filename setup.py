"""
Usage: 'pip install -e .[test]'

Installs the `hiretrack` apps and the `config` project settings.
"""
from setuptools import setup, find_packages

from config import VERSION

# Format :: (1, 0, 0, 0, 'released')
VERSION_NAME = '.'.join(map(str, VERSION[:-2]))

setup(
    name='hiretrack',
    version=VERSION_NAME,
    description='Hiring pipeline core of an applicant tracking system',
    packages=find_packages(include=['hiretrack', 'hiretrack.*', 'config']),
    py_modules=['manage'],
    python_requires='>=3.10',
    install_requires=[
        'Django>=5.1',
        'psycopg2-binary>=2.9',
        'python-dotenv>=1.0',
        'openpyxl>=3.1',
    ],
    extras_require={
        'test': [
            'factory_boy>=3.3',
            'Faker>=20.0',
            'pytest>=7.0',
            'pytest-django>=4.5',
        ],
    },
)
