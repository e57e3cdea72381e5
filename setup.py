# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="filetree",
    version="0.1.0",
    description="Print a directory's contents as a nested JSON tree for file explorers",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["filetree", "filetree.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'filetree=filetree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
