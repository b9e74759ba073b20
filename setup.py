from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="evic",
    version="0.1.0",
    packages=find_packages(include=["evic", "evic.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["evicutil=evic.cli:main"],
    },
    python_requires=">=3.10",
    description="Encrypt and decrypt eVic VTC Mini firmware images",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
