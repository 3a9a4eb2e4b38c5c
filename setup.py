from setuptools import find_packages, setup

setup(
    name="clargs",
    version="0.1.0",
    description="Declare command-line flags and parse argument vectors against them.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "pydantic>=2",
        "pyyaml",
        "toml",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["clargs=clargs.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
