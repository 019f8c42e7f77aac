"""Setup script for Source Mirror."""

from setuptools import setup, find_packages

setup(
    name="source-mirror",
    version="1.0.0",
    description="Streams a folder of C/C++ sources and their changes to an HTTP endpoint",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    author="Source Mirror developers",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "watchdog>=3.0.0",
        "requests>=2.31.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0",
            "responses>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "source-mirror=source_mirror.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development",
    ],
)
