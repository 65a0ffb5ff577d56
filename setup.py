#!/usr/bin/env python
import os
import re

from setuptools import find_packages, setup


def get_version():
    with open(os.path.join("src", "footlights", "version.py"), encoding="utf-8") as f:
        match = re.search(r"^__version__ = [\"']([^\"']+)[\"']", f.read(), re.M)
    if match is None:
        raise RuntimeError("Unable to find __version__ in version.py")
    return match.group(1)


setup(
    name="footlights",
    version=get_version(),
    description="Compose stacked visual layers into SVG documents.",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "attrs>=23.1.0",
        "Pillow>=10.0.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "raster": ["cairosvg>=2.7.0"],
        "test": ["pytest>=7.0"],
    },
    entry_points={"console_scripts": ["footlights=footlights.cli:main"]},
)
