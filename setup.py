#!/usr/bin/python

import codecs
import os
import re

from setuptools import find_packages, setup


here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    with codecs.open(os.path.join(here, *parts), 'r') as f:
        return f.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


if __name__ == '__main__':
    setup(
        name="dnc",
        version=find_version("dnc", "__init__.py"),
        description="Parse and canonicalize X.509 / LDAP distinguished names",
        license="MIT",
        author="The dnc developers",
        packages=find_packages(include=["dnc", "dnc.*"]),
        python_requires=">=3.8",
        install_requires=[
            "Twisted >= 21.2.0",
            "zope.interface >= 5.0",
        ],
        entry_points={
            "console_scripts": [
                "dnc-canonicalize = dnc._scripts.canonicalize:console_script",
            ],
        },
    )
