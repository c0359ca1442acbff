import os
from typing import Dict, Final, List

from setuptools import setup, find_packages

__lib_name__: Final[str] = "utf8str"

install_requires: List[str] = [
    "wcwidth>=0.2",
]

extras_require: Dict[str, List[str]] = {
    "test": ["pytest", "numpy"],
    "bench": ["fire"],
}

entry_points = {
    "console_scripts": [
        "u8_split=cli.split:main",
        "u8_wc=cli.wc:main",
    ],
}

this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, "VERSION"), "r") as f:
    __version__ = f.read().strip()
with open(os.path.join(this_directory, "README.md"), "r", encoding="utf-8") as f:
    long_description = f.read()


setup(
    name=__lib_name__,
    version=__version__,
    description="Edit UTF-8 text by character position while keeping it packed as bytes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Natural Language :: English",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Operating System :: OS Independent",
        "Topic :: Text Processing :: General",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require=extras_require,
    packages=find_packages(include=["utf8str", "utf8str.*", "cli"]),
    entry_points=entry_points,
)
