from setuptools import setup, find_namespace_packages

setup(
    name="consoler",
    version="0.1.0b0",
    description="Verbosity-gated logging facade — categories and tags stay silent until an operator unlocks them",
    packages=find_namespace_packages(where="src", include=["consoler*"]),
    package_dir={"": "src"},
    install_requires=[],
    extras_require={
        "test": ["pytest>=7", "pytest-cov"],
    },
    entry_points={
        "console_scripts": ["consoler=consoler.cli:main"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
