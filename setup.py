# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.0.0.0.1",
    description="Tree-walking evaluator for a small Lisp with S- and Q-Expressions",
    packages=find_packages(include=["lispy", "lispy.*", "lispy_lsp", "lispy_lsp.*"]),
    package_data={"lispy": ["prelude/*.lspy"]},
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.0,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "lispy=lispy.__main__:main",
            "lispy-ls=lispy_lsp.server:main",
            "lispy-repl-server=lispy_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
