import setuptools

setuptools.setup(
    name="dunif",
    version="0.0.1",
    description="Discrete uniform distribution with pluggable random sources",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="Apache License Version 2.0",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "jax",
        "jaxlib",
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "scipy"],
    },
)
