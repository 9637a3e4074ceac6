import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="aioisstracker",
    author="Thomas Protzner",
    author_email="thomas.protzner@gmail.com",
    description="module to track satellites with the wheretheiss.at API",
    license="Apache License 2.0",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=list(val.strip() for val in open("requirements.txt")),
    extras_require={
        "test": [
            "aioresponses",
            "aiohttp<3.14",  # aioresponses 0.7.9 breaks on aiohttp 3.14 (stream_writer)
            "pytest",
            "pytest-asyncio",
            "time-machine",
            "yarl",
        ],
    },
    version="2026.10.0",
    entry_points={
        "console_scripts": ["isstracker=aioisstracker.cli:main"],
    },
)
