#!/usr/bin/env python3
"""Setup script for charsetkit - encoding detection and transcoding for text editors."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text() if (this_directory / "README.md").exists() else ""

# Read requirements from requirements.txt
def read_requirements():
    requirements_file = this_directory / "requirements.txt"
    requirements = []
    if requirements_file.exists():
        with open(requirements_file, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    # Skip git URLs for now - they need special handling
                    if not line.startswith('git+'):
                        requirements.append(line)
    return requirements

setup(
    name="charsetkit",
    version="0.1.0",
    description="Encoding detection and BOM-exact transcoding for text editors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="charsetkit",
    author_email="charsetkit@example.com",
    url="https://github.com/charsetkit/charsetkit",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
        ],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "charsetkit=charsetkit.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Editors",
        "Topic :: Text Processing",
    ],
    keywords="encoding charset detection bom gbk shift_jis text editor",
    project_urls={
        "Bug Reports": "https://github.com/charsetkit/charsetkit/issues",
        "Source": "https://github.com/charsetkit/charsetkit",
    },
)
