# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fileutils-tree",
    version="1.0.0",
    description="Filesystem traversal, JSON/YAML persistence, ZIP archives and tree copying",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fileutils", "fileutils.*"]),
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'fileutils=fileutils.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
