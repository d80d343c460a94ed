from setuptools import setup, find_packages


setup(
    version="0.1.0",
    name="httpbuilder",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "yarl>=1.6.0",
        "aiohttp>=3.8.0",
        "httpx>=0.23.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
)
