import os
import sys

if sys.version_info[:2] < (3, 8):
    print("This xmliter version requires Python 3.8 or later.")
    sys.exit(1)

from setuptools import setup

# versioninfo lives next to this file
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import versioninfo

xmliter_version = versioninfo.version()
print("Building xmliter version %s." % xmliter_version)

extra_options = {}
extra_options['python_requires'] = '>=3.8'
extra_options['install_requires'] = [
    'lxml>=4.5',
]
extra_options['extras_require'] = {
    'cssselect': ['cssselect>=0.7'],
    'test': ['pytest', 'cssselect>=0.7'],
}

extra_options['package_data'] = {
    'xmliter.tests': [
        '*.xml',
        ],
    }

extra_options['package_dir'] = {
        '': 'src'
    }

extra_options['packages'] = [
        'xmliter', 'xmliter.tests'
    ]

setup(
    name = "xmliter",
    version = xmliter_version,
    license="BSD",
    description=(
        "Lazy, re-iterable views over lxml node collections"
        " with namespace-aware XPath queries."
    ),
    long_description=((("""\
xmliter wraps the lxml toolkit (parsing, streaming reads, serialization and
XPath evaluation) and lets callers treat node collections, and filtered or
mapped projections over them, as ordinary Python sequences.

""")) + versioninfo.changes()),
    classifiers=[
        versioninfo.dev_status(),
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Topic :: Text Processing :: Markup :: XML',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,

    **extra_options
)
