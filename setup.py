from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="imglock",
    version="1.0.0",
    packages=find_packages(include=["imglock", "imglock.*"]),
    install_requires=[
        "cryptography>=41.0.0",
        "pillow>=10.0.0",
        "requests>=2.21.0",
    ],
    extras_require={
        "argon2": ["argon2-cffi>=21.3.0"],
        "color": ["colorama>=0.4.6"],
        "test": ["numpy>=1.24.0", "pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["imglock=imglock.main:main"],
    },
    python_requires=">=3.10",
    author="F1xGOD",
    author_email="f1xgodim@gmail.com",
    description="Password-protect static image assets with AES-256-CBC, decrypted at view time",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
