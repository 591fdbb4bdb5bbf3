"""Packaging for create-tag, installs the `create-tag` console command."""

from setuptools import setup, find_packages

requirements = [
    "PyYAML>=6.0",
    "GitPython>=3.1.0",
    "dpath>=2.1.0",
    "rich>=13.0",
]

setup(
    name="create_tag",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "create-tag=create_tag.cli:main",
        ],
    },
    python_requires=">=3.10",
    description="Tool for creating git tags with versioning policy and automatic temporary tag cleanup",
)
