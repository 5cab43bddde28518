from setuptools import setup, find_packages

setup(
    name="keysmith",
    version="0.1.0",
    description="Generate ed25519 and x25519 key pairs encoded as hex, BCS or base64.",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "cryptography>=41.0.0",
        "pynacl>=1.5.0",
        "aptos-sdk>=0.8.0",
        "pydantic>=2.4.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": ["keysmith=keysmith.cli:main"],
    },
    python_requires=">=3.10",
)
