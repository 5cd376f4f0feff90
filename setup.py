#!/usr/bin/env python
"""Setup script for fpkmtools. This is boilerplate, except that command-line
scripts are detected automatically from the contents of `fpkmtools/bin`,
and registered as console entry points.
"""
import os
from setuptools import setup, find_packages

fpkmtools_version = "0.1.0"


#===============================================================================
# Package metadata
#===============================================================================

with open("README.rst") as f:
    long_description = f.read()

install_requires = [
    "numpy>=1.9.4",
    "pandas>=0.17.0",
    "pysam>=0.8.4",
    "termcolor",
]

tests_require = [
    "pytest>=6.0",
]

packages = find_packages()

package_data = {
    "fpkmtools" : ["test/data/*"],
}


def get_scripts():
    """Detect command-line scripts automatically

    Returns
    -------
    list
        list of strings describing command-line scripts
    """
    binscripts = [
        X.replace(".py", "") for X in filter(
            lambda x: x.endswith(".py") and "__init__" not in x,
            os.listdir(os.path.join("fpkmtools", "bin")),
        )
    ]
    return ["%s = fpkmtools.bin.%s:main" % (X, X) for X in binscripts]



#===============================================================================
# Program body
#===============================================================================

setup(

    name             = "fpkmtools",
    version          = fpkmtools_version,
    long_description = long_description,
    long_description_content_type = "text/x-rst",

    description      = "Calculate FPKM from feature counts and GTF2/GFF3 annotations",
    license          = "BSD 3-Clause",
    keywords         = "fpkm rna-seq sequencing genomics gtf gff3 htseq-count",
    platforms        = "OS Independent",

    classifiers      = [
         'Development Status :: 4 - Beta',
         'Programming Language :: Python :: 3',

         'Topic :: Scientific/Engineering :: Bio-Informatics',

         'Intended Audience :: Science/Research',

         'License :: OSI Approved :: BSD License',
         'Operating System :: POSIX',
         'Natural Language :: English',
    ],

    zip_safe = False,
    packages = packages,
    package_data = package_data,

    package_dir = {
        "fpkmtools"  : "fpkmtools",
    },

    entry_points = {
        "console_scripts" : get_scripts()
    },

    install_requires = install_requires,
    extras_require   = {
        "test" : tests_require,
    },

) # yapf: disable
