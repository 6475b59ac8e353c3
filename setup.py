from setuptools import setup, find_packages

setup(
    name="jsonrpc_cli",
    version="0.1.0",
    description="Argument conversion for JSON-RPC command-line clients",
    author="Michael",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "jsonrpc-cli=jsonrpc_cli.cli:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
