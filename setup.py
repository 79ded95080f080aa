"""

Install the sciname package.

"""

from setuptools import setup

setup(
    name="sciname",
    version="0.0",
    description="Canonical renderings of scientific names from their parts.",
    keywords="taxonomy nomenclature scientific names",
    packages=["sciname"],
    install_requires=["unidecode", "mypy", "flake8", "pytest"],
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)
