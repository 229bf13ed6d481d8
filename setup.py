# setup.py
from setuptools import setup, find_packages

setup(
    name="cattywampus",
    version="0.1.0",
    description="A small stack calculator with checked function application",
    packages=find_packages(include=["cattywampus", "cattywampus.*"]),
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={
        "console_scripts": [
            "cattywampus=cattywampus.__main__:main",
            "cattywampus-server=cattywampus.repl_server:main",
        ],
    },
    zip_safe=False,
)
