from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="polypath",
    version="0.1.0",
    author="Andrey Golovanov",
    description="Connected integer 2D paths from SVG-style path strings or point lists.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/networmix/polypath",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    python_requires=">=3.9",
    install_requires=["pyyaml"],
    tests_require=["pytest"],
    extras_require={"dev": ["pytest"]},
    entry_points={"console_scripts": ["polypath=polypath.cli:main"]},
)
