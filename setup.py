# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="flexlog",
    version="1.0.0",
    description="Configurable logging utility with colored console and append-only file sinks",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["flexlog", "flexlog.*"]),
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'flexlog=flexlog.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
