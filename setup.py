from setuptools import setup, find_packages

setup(
    name="hunt_zones",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "numpy",
        "shapely",
        "pyproj",
        "matplotlib",
        "fiona",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
