from setuptools import setup, find_packages

setup(
    name="clipstack",
    version="0.1.0",
    description="Clipboard history manager with search and copy-back",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyperclip",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "clipstack=clipstack.app:main",
        ],
    },
)
