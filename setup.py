# setup.py
from setuptools import setup, find_packages

setup(
    name="wavemesh",
    version="1.0.0",
    description="Wavefront OBJ/MTL mesh loader",
    packages=find_packages(exclude=["testers", "testers.*", "examples", "examples.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
