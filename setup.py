from setuptools import setup, find_packages

setup(
    name="vdireport",
    version="0.1.0",
    description="Diagnostic report for VDI-optimized conferencing client sessions",
    author="",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich>=12.5.0",
        "pydantic>=2.6.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vdireport=vdireport.main:main",
        ],
    },
)
