import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="eip712_codegen",
    version="1.0.0",
    description="Generate Solidity EIP-712 type hashes, hash getters, digest and signer getters with documentation",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Intended Audience :: Developers",
    ],
    keywords="eip712 solidity typed data code generation signature",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "eth-abi>=5.0.0",
        "eth-account>=0.13.0,<0.14",
        "eth-keys>=0.5.0",
        "eth-utils>=4.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "eip712_codegen=eip712_codegen.eip712_codegen:eip712_codegen",
        ],
    },
    include_package_data=True,
    package_data={
        "eip712_codegen": ["templates/**/*.jinja2"],
    },
    zip_safe=False,
)
