"""Setup script for the docman package."""
from setuptools import setup, find_packages

setup(
    name="docman",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.25.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "docman=docman.__main__:run",
        ],
    },
    python_requires=">=3.8",
    description="Assemble a reference list for the [id] citations of a plain-text document",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="reference citation bibliography",
    classifiers=[
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Markup",
    ],
)
