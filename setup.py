from setuptools import setup, find_packages

setup(
    name="unitconverter",
    version="0.1.0",
    packages=find_packages(include=["unitconverter", "unitconverter.*"]),
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
        "docs": ["sphinx", "furo"],
    },
    entry_points={
        "console_scripts": [
            "unitconverter=unitconverter.cli:main",
        ],
    },
    description=(
        "Parses textual unit expressions such as 'kg*m/s^2', 'kWh' or 'degC', "
        "reduces them to SI base dimensions and converts values between them, "
        "including SI prefixes and absolute temperature scales."
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
)
