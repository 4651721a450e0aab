from setuptools import setup, find_packages

setup(
    name="difflines",
    version="0.1.0",
    description="Unified diff parser and normalizer",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "fastapi>=0.100",
        "uvicorn>=0.20",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "difflines=difflines.cli:main",
        ],
    },
)
