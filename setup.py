# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="localeflat",
    version="0.1.0",
    description="Flatten locale YAML files of a project into one JSON key/translation table",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["localeflat", "localeflat.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'localeflat=localeflat.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
