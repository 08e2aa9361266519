from setuptools import find_packages, setup

setup(
    name="trimasm",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    entry_points={"console_scripts": ["trimasm = trimasm.main:cli"]},
    test_suite="tests",
    python_requires=">=3.10",
    install_requires=["typer", "rich", "typing_extensions"],
    extras_require={"test": ["pytest"]},
    author="Simon Opstrup Drue",
    author_email="simondrue@gmail.com",
)
