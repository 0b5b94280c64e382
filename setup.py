from pathlib import Path
from setuptools import setup, find_packages

README = (Path(__file__).parent / "README.md")
long_desc = README.read_text(encoding="utf-8") if README.exists() else "site-verify – build output checks for the academic website"

setup(
    name="site-verify",
    version="0.1.0",
    description="site-verify – checks the generated dist/ of the academic website before deployment",
    long_description=long_desc,
    long_description_content_type="text/markdown",
    author="Rahual Rai",
    python_requires=">=3.11",
    packages=find_packages(include=["site_verify", "site_verify.*"]),
    include_package_data=True,
    package_data={"site_verify": ["build_checks.yaml"]},
    install_requires=[
        "pydantic>=2,<3",
        "PyYAML>=6,<7",
        "rich>=13,<14",
        "orjson>=3,<4",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "verify-build=site_verify.verify_build:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
