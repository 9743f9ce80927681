from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="format-tools",
    version="0.1.0",
    packages=find_packages(where="src"),
    py_modules=["cli"],
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "format-tools=cli:cli",
            "ft=cli:cli"
        ],
    },
    python_requires=">=3.9",
    description="Recursively format C and C++ sources with clang-format",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="clang-format, formatting, developer tools",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Utilities",
    ],
)
