import itertools
import re
import os

from setuptools import find_packages, setup

dependencies = ["biopython", "marshmallow_dataclass", "marshmallow", "methodtools"]

with open(os.path.join(os.path.dirname(__file__), "bioannot", "__init__.py")) as v_file:
    VERSION = re.compile(r""".*__version__ = ["'](.*?)['"]""", re.S).match(v_file.read()).group(1)

extra_dependencies = {
    "test": ["black", "flake8", "pytest", "pytest-cov"],
    "docs": [
        "Sphinx",
        "sphinx_rtd_theme",
        "sphinx-autoapi",
        "recommonmark",
    ],
}

all_dependencies = list(itertools.chain.from_iterable(extra_dependencies.values()))
extra_dependencies["all"] = all_dependencies

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="BioAnnot",
    description="Coordinate algebra for stranded, contiguous and spliced annotations on reference sequences.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    test_suite="pytest",
    packages=find_packages(include=["bioannot", "bioannot.*"]),
    include_package_data=True,
    tests_require=extra_dependencies["test"],
    extras_require=extra_dependencies,
    install_requires=dependencies,
    version=VERSION,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
