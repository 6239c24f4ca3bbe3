from setuptools import setup, find_packages

setup(
    name="bond_analytics",
    version="0.1.0",
    description="Single-bond price, duration and convexity analytics",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
        "requests",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
