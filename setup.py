from setuptools import setup, find_packages


setup(
    name='bonding_curves',
    version='0.1',
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
