from setuptools import setup

with open("README.rst", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="geostruct",
    version="0.1.0",
    description="Typed GeoJSON (RFC 7946) objects and conversions, built on msgspec",
    long_description=long_description,
    license="BSD",
    packages=["geostruct"],
    package_data={"geostruct": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18"],
    extras_require={"test": ["pytest"]},
)
