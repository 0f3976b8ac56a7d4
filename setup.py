# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="lisplet",
    version="0.1.0",
    description="A small lexically scoped Lisp: scanner, reader, evaluator and builtins",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["lisplet", "lisplet.*", "lisplet_lsp", "lisplet_lsp.*"]),
    package_data={"lisplet": ["prelude/*.lisp"]},
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "lisplet=lisplet.__main__:main",
            "lisplet-ls=lisplet_lsp.server:main",
        ],
    },
    zip_safe=False,
)
