from setuptools import find_packages, setup

# Basic metadata
VERSION = "0.1.0"

INSTALL_REQUIRES = [
    "typer>=0.9",
    "rich>=13.0",
    "python-dotenv>=1.0",
    "pydantic>=2.0",
    "pydantic-settings>=2.0",
    "PyYAML>=6.0",
]

EXTRAS_REQUIRE = {
    "test": ["pytest>=7.0"],
}


setup(
    name="safename",
    version=VERSION,
    description="Filesystem-safe, collision-free filename resolution",
    python_requires=">=3.10",
    # Ensure the safename package is installed from the src/ layout
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        "console_scripts": [
            "safename=safename.cli.main:app",
        ],
    },
)
