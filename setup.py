# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
"""
A setuptools based setup module.
See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages
import os
import re

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, 'src', 'PfSolnEngine', '__version__.py'), 'r') as f:
    __PfSolnEngine_VERSION__ = re.search(r'__PfSolnEngine_VERSION__\s*=\s*"([^"]+)"', f.read()).group(1)

long_description = """# PfSolnEngine

Update of the power system state after a DC power flow solution:
bus voltage modules, generator reactive powers (split among the generators that
share a bus), slack generator active powers and branch power flows.

## Installation

pip install PfSolnEngine
"""

description = 'Solution update routines for the DC power flow'

pkgs_to_exclude = ['docs', 'tests']

packages = find_packages(where='src', exclude=pkgs_to_exclude)

# ... so we have to do the filtering ourselves
packages2 = list()
for package in packages:
    elms = package.split('.')
    excluded = False
    for exclude in pkgs_to_exclude:
        if exclude in elms:
            excluded = True

    if not excluded:
        packages2.append(package)

dependencies = ['setuptools>=41.0.1',
                "numpy>=1.24",
                "scipy>=1.0.0",
                "pandas>=2.2.3",
                "numba>=0.60",  # to compile routines natively
                ]

extras_require = {
    'test': ["pytest>=7.2"]
}
# Arguments marked as "Required" below must be included for upload to PyPI.
# Fields marked as "Optional" may be commented out.

setup(
    name='PfSolnEngine',  # Required
    version=__PfSolnEngine_VERSION__,  # Required
    license='MPL2',
    description=description,  # Optional
    long_description=long_description,  # Optional
    long_description_content_type='text/markdown',  # Optional (see note above)
    classifiers=[
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
        'Programming Language :: Python :: 3.8',
    ],
    keywords='power systems dc power flow',  # Optional
    packages=packages2,  # Required
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=dependencies,
    extras_require=extras_require,
)
