# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

import os
import setuptools


def project_path(*sub_paths):
    project_dirpath = os.path.abspath(os.path.dirname(__file__))
    return os.path.join(project_dirpath, *sub_paths)


def read(*sub_paths):
    with open(project_path(*sub_paths), mode="rb") as fobj:
        return fobj.read().decode("utf-8")


def read_requirements(*sub_paths):
    return [
        line.strip()
        for line in read(*sub_paths).splitlines()
        if line.strip() and not line.startswith("#")
    ]


install_requires = read_requirements("requirements", "pypi.txt")
tests_require    = read_requirements("requirements", "test.txt")


long_description = "\n\n".join((read("README.md"), read("CHANGELOG.md")))


setuptools.setup(
    name="kdfid",
    license="MIT",
    author="Manuel Barkhau",
    author_email="mbarkhau@gmail.com",
    version="2022.1009b0",
    keywords="argon2 argon2id kdf key derivation password encryption",
    description="Derive encryption keys from a password using Argon2id.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["kdfid"],
    package_dir={"": "src"},
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={'test': tests_require},
    entry_points="""
        [console_scripts]
        kdf-argon2id=kdfid.cli:cli
    """,

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: Unix",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Security :: Cryptography",
        "Topic :: Utilities",
    ],
)
