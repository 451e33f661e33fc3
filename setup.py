from setuptools import setup, find_packages

setup(
    name="styledtext",
    version="0.1.0",
    description="Composable styled text rendered to HTML and the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
