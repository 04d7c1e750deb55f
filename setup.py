from setuptools import find_packages, setup

setup(
    name="proplist",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    license="MIT License",
    author="Christopher Rink",
    author_email="chrisrink10@gmail.com",
    description="Dictionary-like operations over ordered property lists",
    python_requires=">=3.9",
    install_requires=[
        "attrs>=22.2.0",
        "pyrsistent>=0.18.0",
        "typing_extensions>=4.7.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
)
