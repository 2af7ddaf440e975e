from setuptools import find_packages, setup

setup(
    name="clustercert",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "cryptography>=42",
        "asn1crypto",
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "clustercert=clustercert.cli:cli",
        ],
    },
)
