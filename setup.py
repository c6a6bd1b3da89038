from setuptools import setup

setup(
    name="wavefront",
    version="0.1.0",
    packages=["wavefront"],
    python_requires=">=3.7",
    install_requires=[],
    extras_require={"test": ["numpy", "pytest", "pytest-cov", "pytest-xdist"]},
)
