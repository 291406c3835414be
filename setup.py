from setuptools import setup, find_packages

setup(
    name="ecarith_package",
    version="0.1.0",
    description="Prime field and short Weierstrass elliptic curve arithmetic",
    url="https://github.com/yourusername/ecarith_package",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=["sympy"],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.12",
)
