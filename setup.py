# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

PACKAGE_NAME = 'nmeatool'
PACKAGE_VERSION = '0.1.0'

INSTALL_REQUIRES = [
    'coloredlogs',
    'gpxpy'
]

TESTS_REQUIRE = [
    'coverage',
    'pycodestyle',
    'pytest',
    'pytest-pycodestyle'
]

DEV_REQUIRES = TESTS_REQUIRE

setup(
    name=PACKAGE_NAME,
    version=PACKAGE_VERSION,
    description='Decoder for NMEA 0183 sentences from GPS, AIS, depth and heading equipment',
    classifiers=[
        'Environment :: Console',
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: GIS'
    ],
    keywords=['nmea', 'nmea0183', 'gps', 'gnss', 'ais', 'maritime', 'navigation', 'parser'],
    license='GPLv3',
    packages=find_packages(exclude=["tests"]),
    python_requires='>=3.8',
    zip_safe=True,
    install_requires=INSTALL_REQUIRES,
    extras_require={'dev': DEV_REQUIRES, 'test': TESTS_REQUIRE},  # For `pip install -e .[dev]`
    entry_points={
        'console_scripts': [
            'nmeatool = nmeatool.main:main'
        ]
    }
)
