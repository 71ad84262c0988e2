# -*- coding: utf-8 -*-
import codecs
from setuptools import setup, find_packages


tests_require = [
    'pytest>=7.0',
]

setup(
    name='Potion-Client',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    url='http://potion.readthedocs.org/en/latest/',
    license='MIT',
    author='Lars Schöning',
    author_email='lars@lyschoening.de',
    description='Hypermedia client for REST APIs that describe their resources with links',
    long_description=codecs.open('README.rst', encoding='utf-8').read(),
    tests_require=tests_require,
    python_requires='>=3.8',
    install_requires=[
        'Flask>=2.2',
        'Werkzeug>=2.2',
        'jsonschema>=2.4.0',
        'aniso8601>=0.84',
        'blinker>=1.3',
        'requests>=2.0',
        'uritemplate>=3.0',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,
    extras_require={
        'docs': ['sphinx'],
        'tests': tests_require,
    }
)
