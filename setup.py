from os import path
from setuptools import setup, find_packages

here = path.abspath(path.dirname(__file__))

# get the long description from the README file
with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()


setup(
    # metadata
    name="yahtzeekit",
    version="0.1.0",
    description="Single-player Yahtzee in your terminal.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    # module
    packages=find_packages(exclude=["docs", "tests", "tests.*"]),
    python_requires=">=3.8",
    # dependencies
    install_requires=[
        "click",
        "numpy",
        "loguru",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    # CLI
    entry_points="""
        [console_scripts]
        yahtzeekit=yahtzeekit.cli:cli
    """,
)
