"""
LiteLLM Config Builder - routing configuration generator for the LiteLLM proxy

This setup.py file is provided for pip install compatibility.
"""

from setuptools import find_packages, setup

# This enables pip install -e . for development
if __name__ == "__main__":
    setup(
        name="litellm-config-builder",
        version="0.1.0",
        description="Expand multi-provider model intents (regions, credentials, variations) into LiteLLM proxy configurations.",
        long_description=open("README.md", encoding="utf-8").read(),
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=find_packages("src"),
        python_requires=">=3.11",
        install_requires=[
            "pydantic>=2.0",
            "PyYAML>=6.0",
        ],
        extras_require={
            "test": [
                "pytest>=7.0",
            ],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Code Generators",
        ],
    )
