# setup.py
from setuptools import setup, find_packages

setup(
    name="movingblocks",
    version="1.0.0",
    description="Animated tree of transformable blocks with hit-testing",
    packages=find_packages(include=["movingblocks", "movingblocks.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "glfw>=2.5.0",
        "PyOpenGL>=3.1.5",
        "Pillow>=9.2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
