from setuptools import find_packages, setup

# Find all packages - physical structure under packages/ matches import path
packages = find_packages(where="packages", include=["lumenr", "lumenr.*"])

setup(
    name="lumenr",
    version="0.1.0",
    description="Light profiles parsed from free-form item descriptions",
    packages=packages,
    package_dir={"": "packages"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    entry_points={
        "console_scripts": [
            "lumenr=lumenr.cli.main:main",
        ],
    },
)
