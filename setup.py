from setuptools import find_packages, setup

setup(
    name="urikit",
    version="0.3.1",
    description="RFC 6570 URI Template parsing and expansion",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["urikit", "urikit.*"]),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
)
