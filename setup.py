from setuptools import setup, find_packages

setup(
    name="easyargs",
    version="0.1.0",
    description="Declaration-driven command-line argument parsing with generated help.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="EasyArgs Maintainers",
    packages=find_packages(include=["easyargs", "easyargs.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "easyargs=easyargs.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
