from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pixoo-client",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="A library for drawing on Divoom Pixoo pixel displays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/pixoo-client",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    install_requires=[
        "requests>=2.25.0",
        "urllib3>=1.26.0",
        "python-dotenv>=0.15.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
